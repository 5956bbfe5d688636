"""
Enhancer Content Tables

Static, read-only recommendation tables used to assemble the enhanced prompt.

Every table is built from tuples (or wrapped in a MappingProxyType) so nothing
here can be mutated after import. Editing these tables is the only way to
change what the enhancer recommends.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from prompt_enhancer.agents.enhancer.types import RequestType

# =============================================================================
# TECH UPGRADES
# =============================================================================
# Basic stack a request usually implies -> the stack we recommend instead.
# =============================================================================

TECH_UPGRADES: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    "frontend": MappingProxyType({
        "basic": ("HTML", "CSS", "JavaScript"),
        "enhanced": ("React", "Vite", "Tailwind CSS"),
    }),
    "backend": MappingProxyType({
        "basic": ("Express", "REST API"),
        "enhanced": ("NestJS", "GraphQL", "TypeScript"),
    }),
    "database": MappingProxyType({
        "basic": ("MongoDB", "MySQL"),
        "enhanced": ("PostgreSQL", "Prisma ORM"),
    }),
    "deployment": MappingProxyType({
        "basic": ("manual upload",),
        "enhanced": ("Docker", "CI/CD", "Vercel"),
    }),
})

# =============================================================================
# BEST PRACTICES
# =============================================================================

BEST_PRACTICES: Tuple[str, ...] = (
    "Use TypeScript for type safety",
    "Implement responsive design",
    "Follow component-based architecture",
    "Include proper error handling",
    "Add basic accessibility features",
    "Set up a proper project structure",
    "Implement dark/light theme toggle",
    "Add loading states and error boundaries",
)

# Practices mentioning this word are dropped for the given request type
PRACTICE_EXCLUSIONS: Mapping[str, str] = MappingProxyType({
    "website": "database",
    "backend": "theme",
})

# =============================================================================
# PROJECT SETUP
# =============================================================================

FRONTEND_SETUP: Tuple[str, ...] = (
    "Framework: React with Vite for fast development and optimized builds",
    "Styling: Tailwind CSS for utility-first styling approach",
    "Language: TypeScript for type safety and better developer experience",
    "State Management: React Context API or Zustand for simpler state management",
)

BACKEND_SETUP: Tuple[str, ...] = (
    "Framework: NestJS with TypeScript",
    "API: GraphQL for flexible data fetching",
    "Database: PostgreSQL with Prisma ORM",
    "Authentication: JWT with refresh token strategy",
)

DEV_ENVIRONMENT_SETUP: Tuple[str, ...] = (
    "Docker for consistent development environments",
    "ESLint and Prettier for code quality",
    "GitHub Actions for CI/CD pipeline",
    "Deployment: Vercel (frontend) and Railway/Render (backend)",
)

# =============================================================================
# SPECIFIC ENHANCEMENTS
# =============================================================================

SPECIFIC_ENHANCEMENTS: Mapping[RequestType, Tuple[str, ...]] = MappingProxyType({
    "website": (
        "Replace basic HTML/CSS with React components using Tailwind CSS",
        "Add responsive design using Tailwind's breakpoint system",
        "Implement proper routing with React Router",
        "Use React hooks for state management",
        "Add animations using Framer Motion for better UX",
        "Implement lazy loading for images and components",
    ),
    "backend": (
        "Use NestJS modules for better organization",
        "Implement GraphQL API instead of REST",
        "Add proper validation with class-validator",
        "Set up comprehensive error handling",
        "Add request logging middleware",
        "Implement rate limiting for API endpoints",
    ),
    "fullstack": (
        "Create a monorepo structure with pnpm workspace",
        "Share types between frontend and backend",
        "Use GraphQL codegen for type-safe queries",
        "Implement authentication with JWT and refresh tokens",
        "Add end-to-end testing with Cypress",
        "Set up database migrations and seeding",
    ),
})

# =============================================================================
# IMPLEMENTATION STEPS
# =============================================================================
# Each step is (description, commands). Commands are rendered as a literal
# bash block under the step; they are never executed.
# =============================================================================

Step = Tuple[str, Tuple[str, ...]]

FRONTEND_STEPS: Tuple[Step, ...] = (
    (
        "Initialize a new Vite project with React and TypeScript template:",
        ("npm create vite@latest my-app --template react-ts",),
    ),
    (
        "Install Tailwind CSS and necessary dependencies:",
        ("npm install -D tailwindcss postcss autoprefixer", "npx tailwindcss init -p"),
    ),
    ("Configure Tailwind CSS in the project", ()),
    ("Create responsive layouts with Tailwind's utility classes", ()),
    ("Implement component structure and routing", ()),
)

BACKEND_STEPS: Tuple[Step, ...] = (
    (
        "Create a new NestJS project:",
        ("npm i -g @nestjs/cli", "nest new backend"),
    ),
    (
        "Set up GraphQL with NestJS:",
        ("npm i @nestjs/graphql @nestjs/apollo graphql apollo-server-express",),
    ),
    (
        "Configure PostgreSQL with Prisma:",
        ("npm install prisma @prisma/client", "npx prisma init"),
    ),
    ("Define database schema and generate Prisma client", ()),
    ("Create GraphQL resolvers and services", ()),
)

INTEGRATION_STEPS: Tuple[Step, ...] = (
    ("Set up shared types between frontend and backend", ()),
    ("Implement API fetching on frontend using Apollo Client", ()),
    ("Set up authentication flow between frontend and backend", ()),
    ("Configure deployment pipeline for both services", ()),
)
