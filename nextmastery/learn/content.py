"""
nextmastery/learn/content.py
Static course catalogue: courses, chapters and lessons with their card text.
"""
from __future__ import annotations
from typing import Dict, List, Any

# ── Course catalogue ──────────────────────────────────────────────────────────
# Structure (all keys are strings):
#   course  : id, title, nav_title, icon, summary, description, chapters
#   chapter : id, title, summary (card line), description (intro), lessons
#   lesson  : id, order, title, description, topics
#
# ids become URL segments: /learn/<course>/<chapter>/<lesson>.
# Lesson order must be unique within its chapter and is used for
# previous/next links. Loaded once into the LessonRegistry at import time.

COURSES: List[Dict[str, Any]] = [

    # ═══════════════════════════ APP ROUTER ══════════════════════════════════

    {
        "id": "app-router",
        "title": "App Router Mastery",
        "nav_title": "App Router",
        "icon": "⚡",
        "summary": "Learn the latest Next.js App Router with React Server Components, Server Actions, and all modern features.",
        "description": "Complete guide to Next.js App Router. Every method, every concept covered.",
        "chapters": [
            {
                "id": "b1",
                "title": "B1: Foundation & Setup",
                "summary": "Project setup, structure, and core concepts",
                "description": (
                    "Learn the fundamentals of Next.js App Router setup and core "
                    "concepts."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B1.1: Project Setup",
                        "description": "Complete project setup with create-next-app, manual setup, project structure, configuration, and environment variables",
                        "topics": [
                            "create-next-app with App Router",
                            "Manual setup with app/ directory",
                            "Project structure (app/, public/, components/, lib/)",
                            "next.config.js configuration (all options)",
                            "Environment variables",
                            "TypeScript setup for App Router",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B1.2: Core Concepts",
                        "description": "React Server Components, Server vs Client Components, component tree, streaming, Server Actions, and progressive enhancement",
                        "topics": [
                            "React Server Components",
                            "Server Components vs Client Components",
                            "Component tree structure",
                            "Streaming and Suspense",
                            "Server Actions",
                            "Progressive Enhancement",
                        ],
                    },
                ],
            },
            {
                "id": "b2",
                "title": "B2: Routing System",
                "summary": "Complete routing system with layouts, pages, and special files",
                "description": (
                    "Master the complete routing system in Next.js App Router. Learn "
                    "about routes, layouts, special files, loading states, error "
                    "handling, and not-found pages."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B2.1: Basic Routing",
                        "description": "Route segments, nested routes, layouts, route groups, parallel routes, intercepting routes, and dynamic routes",
                        "topics": [
                            "Route segments (app/page.js)",
                            "Nested routes (app/about/page.js)",
                            "Layouts (app/layout.js)",
                            "Nested layouts",
                            "Route groups (folder) - parentheses syntax",
                            "Parallel routes @folder - @ prefix syntax",
                            "Intercepting routes (.), (..), (...) - relative path syntax",
                            "Dynamic routes (app/[id]/page.js)",
                            "Catch-all routes (app/[...slug]/page.js)",
                            "Optional catch-all routes (app/[[...slug]]/page.js)",
                            "Nested dynamic routes",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B2.2: Special Files",
                        "description": "All special files in App Router: layout.js, page.js, loading.js, error.js, not-found.js, template.js, default.js, route.js, and global-error.js",
                        "topics": [
                            "layout.js (layouts at all levels)",
                            "page.js (route pages)",
                            "loading.js (loading UI)",
                            "error.js (error boundaries)",
                            "not-found.js (not found UI)",
                            "template.js (templates)",
                            "default.js (parallel route fallback)",
                            "route.js (route handlers)",
                            "global-error.js (global error boundary)",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B2.3: Layout System",
                        "description": "Root layout, nested layouts, layout composition, props, state persistence, and re-rendering behavior",
                        "topics": [
                            "Root layout (required)",
                            "Nested layouts",
                            "Layout composition",
                            "Layout props (children, params)",
                            "Layout state persistence",
                            "Layout re-rendering behavior",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "B2.4: Loading States",
                        "description": "loading.js file, Suspense boundaries, streaming SSR, loading skeletons, and nested loading states",
                        "topics": [
                            "loading.js file",
                            "Suspense boundaries",
                            "Streaming SSR",
                            "Loading skeletons",
                            "Nested loading states",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "B2.5: Error Handling",
                        "description": "error.js file, error boundaries, error props, error recovery, global-error.js, and nested error boundaries",
                        "topics": [
                            "error.js file",
                            "Error boundaries",
                            "Error props (error, reset)",
                            "Error recovery",
                            "global-error.js",
                            "Nested error boundaries",
                        ],
                    },
                    {
                        "id": "lesson-6",
                        "order": 6,
                        "title": "B2.6: Not Found Handling",
                        "description": "not-found.js file, notFound() function, custom 404 pages, and nested not-found",
                        "topics": [
                            "not-found.js file",
                            "notFound() function",
                            "Custom 404 pages",
                            "Nested not-found",
                        ],
                    },
                ],
            },
            {
                "id": "b3",
                "title": "B3: Data Fetching",
                "summary": "Server Components, caching, and data fetching strategies",
                "description": (
                    "Master data fetching in Next.js App Router. Learn Server Components "
                    "data fetching, caching strategies, client-side fetching, and "
                    "streaming with Suspense."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B3.1: Server Components Data Fetching",
                        "description": "Async Server Components, Fetch API, caching options, revalidation strategies, and database queries",
                        "topics": [
                            "Async Server Components",
                            "Fetch API in Server Components",
                            "Fetch caching (all cache options)",
                            "Fetch revalidation (next.revalidate, next.revalidatePath, next.revalidateTag)",
                            "Time-based revalidation",
                            "On-demand revalidation",
                            "Tag-based revalidation",
                            "Database queries in Server Components",
                            "API calls in Server Components",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B3.2: Caching Functions",
                        "description": "unstable_cache, cache function, revalidatePath, revalidateTag, cache strategies, and cache invalidation",
                        "topics": [
                            "unstable_cache function",
                            "cache function (React cache)",
                            "revalidatePath function",
                            "revalidateTag function",
                            "Cache strategies",
                            "Cache invalidation",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B3.3: Client-Side Data Fetching",
                        "description": "Client Components with fetch, useEffect, SWR, React Query, loading states, and error handling",
                        "topics": [
                            "Client Components with fetch",
                            "useEffect data fetching",
                            "SWR integration",
                            "React Query integration",
                            "Loading states",
                            "Error handling",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "B3.4: Streaming & Suspense",
                        "description": "Streaming SSR, Suspense boundaries, loading states, progressive rendering, and error boundaries with streaming",
                        "topics": [
                            "Streaming SSR",
                            "Suspense boundaries",
                            "Loading states",
                            "Progressive rendering",
                            "Error boundaries with streaming",
                        ],
                    },
                ],
            },
            {
                "id": "b4",
                "title": "B4: Server Actions",
                "summary": "Server Actions, Form Actions, and progressive enhancement",
                "description": (
                    "Master Server Actions in Next.js App Router. Learn how to create "
                    "server-side functions, handle forms with progressive enhancement, "
                    "and implement advanced patterns for data mutations."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B4.1: Server Actions Basics",
                        "description": "'use server' directive, Server Action functions, async actions, error handling, and TypeScript types",
                        "topics": [
                            "'use server' directive",
                            "Server Action functions",
                            "Async Server Actions",
                            "Error handling",
                            "TypeScript types",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B4.2: Form Actions",
                        "description": "Forms with Server Actions, Progressive Enhancement, useFormStatus, useFormState, validation, file uploads, and multi-step forms",
                        "topics": [
                            "Form with Server Actions",
                            "Progressive Enhancement",
                            "useFormStatus hook",
                            "useFormState hook",
                            "Form validation",
                            "File uploads",
                            "Multi-step forms",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B4.3: Server Actions Patterns",
                        "description": "Inline Server Actions, Server Action files, revalidation after actions, optimistic updates, and error handling patterns",
                        "topics": [
                            "Inline Server Actions",
                            "Server Action files",
                            "Revalidation after actions",
                            "Optimistic updates",
                            "Error handling patterns",
                        ],
                    },
                ],
            },
            {
                "id": "b5",
                "title": "B5: Route Handlers",
                "summary": "API routes, HTTP methods, and route handlers",
                "description": (
                    "Master Route Handlers in Next.js App Router. Learn how to create "
                    "API endpoints, handle HTTP methods, implement advanced features, "
                    "and follow best practices for building robust APIs."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B5.1: Route Handler Basics",
                        "description": "File structure, HTTP methods (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS), Request/Response handling, and TypeScript types",
                        "topics": [
                            "File structure (app/api/route.js)",
                            "HTTP methods (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS)",
                            "Request/Response handling",
                            "TypeScript types",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B5.2: Route Handler Features",
                        "description": "Dynamic routes, catch-all routes, optional catch-all, route segment config, Edge/Node.js runtime, streaming responses, and CORS handling",
                        "topics": [
                            "Dynamic route handlers",
                            "Catch-all route handlers",
                            "Optional catch-all",
                            "Route segment config",
                            "Edge runtime",
                            "Node.js runtime",
                            "Streaming responses",
                            "CORS handling",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B5.3: Route Handler Patterns",
                        "description": "RESTful API design, error handling, authentication, file uploads, webhooks, and response streaming",
                        "topics": [
                            "RESTful API design",
                            "Error handling",
                            "Authentication",
                            "File uploads",
                            "Webhooks",
                            "Response streaming",
                        ],
                    },
                ],
            },
            {
                "id": "b6",
                "title": "B6: Navigation & Routing",
                "summary": "next/navigation hooks, Link component, and URL state",
                "description": (
                    "Master navigation and routing in Next.js App Router. Learn how to "
                    "use navigation hooks, the Link component, and manage URL state "
                    "effectively."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B6.1: next/navigation",
                        "description": "useRouter, usePathname, useSearchParams, useParams hooks, redirect, permanentRedirect, notFound functions, navigation methods, and prefetching",
                        "topics": [
                            "useRouter hook (all methods)",
                            "usePathname hook",
                            "useSearchParams hook",
                            "useParams hook",
                            "redirect function",
                            "permanentRedirect function",
                            "notFound function",
                            "Navigation methods (push, replace, refresh, back, forward)",
                            "Prefetching behavior",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B6.2: next/link",
                        "description": "Link component with all props, prefetching, scroll behavior, shallow routing note, and active link styling",
                        "topics": [
                            "Link component (all props)",
                            "Prefetching",
                            "Scroll behavior",
                            "Shallow routing (not in App Router - note this)",
                            "Active link styling",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B6.3: URL State Management",
                        "description": "Search params, query parameters, hash navigation, and URL state patterns",
                        "topics": [
                            "Search params",
                            "Query parameters",
                            "Hash navigation",
                            "URL state patterns",
                        ],
                    },
                ],
            },
            {
                "id": "b7",
                "title": "B7: Metadata API",
                "summary": "Static and dynamic metadata, SEO optimization",
                "description": (
                    "Master the Metadata API in Next.js App Router. Learn how to "
                    "configure static and dynamic metadata for optimal SEO, social media "
                    "sharing, and search engine optimization."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B7.1: Static Metadata",
                        "description": "Metadata object export, all metadata types, Open Graph, Twitter Cards, icons, manifest, robots, and verification metadata",
                        "topics": [
                            "Metadata object export",
                            "All metadata types (title, description, keywords, authors, etc.)",
                            "Open Graph metadata",
                            "Twitter Card metadata",
                            "Icons and manifest",
                            "Robots metadata",
                            "Verification metadata",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B7.2: Dynamic Metadata",
                        "description": "generateMetadata function, async metadata generation, metadata with params and searchParams, inheritance, and merging",
                        "topics": [
                            "generateMetadata function",
                            "Async metadata generation",
                            "Metadata with params",
                            "Metadata with searchParams",
                            "Metadata inheritance",
                            "Metadata merging",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B7.3: Metadata Patterns",
                        "description": "SEO optimization, social media sharing, dynamic titles, canonical URLs, and alternate languages",
                        "topics": [
                            "SEO optimization",
                            "Social media sharing",
                            "Dynamic titles",
                            "Canonical URLs",
                            "Alternate languages",
                        ],
                    },
                ],
            },
            {
                "id": "b8",
                "title": "B8: Components & Features",
                "summary": "next/image, next/script, next/font optimization",
                "description": (
                    "Master Next.js optimized components: Image, Script, and Font. Learn "
                    "how to optimize images, scripts, and fonts for better performance "
                    "and user experience."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B8.1: next/image",
                        "description": "Image component with all props, optimization features, loading strategies, placeholders, sizes, srcSet, priority loading, external domains, image formats, and responsive images",
                        "topics": [
                            "Image component (all props)",
                            "Optimization features",
                            "Loading strategies",
                            "Placeholders",
                            "Sizes and srcSet",
                            "Priority loading",
                            "External domains",
                            "Image formats",
                            "Responsive images",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B8.2: next/script",
                        "description": "Script component, loading strategies, inline scripts, external scripts, and script optimization",
                        "topics": [
                            "Script component",
                            "Loading strategies",
                            "Inline scripts",
                            "External scripts",
                            "Script optimization",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B8.3: next/font",
                        "description": "Font optimization, next/font/google, next/font/local, font display strategies, variable fonts, and font preloading",
                        "topics": [
                            "Font optimization",
                            "next/font/google",
                            "next/font/local",
                            "Font display strategies",
                            "Variable fonts",
                            "Font preloading",
                        ],
                    },
                ],
            },
            {
                "id": "b9",
                "title": "B9: Styling",
                "summary": "CSS Modules, Tailwind, CSS-in-JS, and styling strategies",
                "description": (
                    "Master styling in Next.js App Router. Learn CSS Modules, Global "
                    "CSS, CSS-in-JS, Sass/SCSS, and Tailwind CSS for modern web styling."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B9.1: CSS Modules",
                        "description": "File naming (*.module.css), scoped styles, composition, and global styles",
                        "topics": [
                            "File naming (*.module.css)",
                            "Scoped styles",
                            "Composition",
                            "Global styles",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B9.2: Global CSS",
                        "description": "Importing in layout, CSS reset, CSS variables, and dark mode",
                        "topics": [
                            "Importing in layout",
                            "CSS reset",
                            "CSS variables",
                            "Dark mode",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B9.3: CSS-in-JS",
                        "description": "Styled-components, Emotion, Styled JSX, and theme providers",
                        "topics": [
                            "Styled-components (Client Components)",
                            "Emotion (Client Components)",
                            "Styled JSX",
                            "Theme providers",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "B9.4: Sass/SCSS",
                        "description": "Setup, variables and mixins, and nested styles",
                        "topics": [
                            "Setup",
                            "Variables and mixins",
                            "Nested styles",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "B9.5: Tailwind CSS",
                        "description": "Setup, configuration, custom utilities, and dark mode",
                        "topics": [
                            "Setup",
                            "Configuration",
                            "Custom utilities",
                            "Dark mode",
                        ],
                    },
                ],
            },
            {
                "id": "b10",
                "title": "B10: Advanced Features",
                "summary": "Middleware, route segment config, i18n, and more",
                "description": (
                    "Master advanced features in Next.js App Router. Learn middleware, "
                    "route segment configuration, internationalization, redirects & "
                    "rewrites, environment variables, and draft mode."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B10.1: Middleware (App Router)",
                        "description": "File location (middleware.js), matcher configuration, request/response manipulation, redirects, rewrites, headers, cookies, authentication, Edge runtime, and NextResponse API",
                        "topics": [
                            "File location (middleware.js in root)",
                            "Matcher configuration",
                            "Request/Response manipulation",
                            "Redirects",
                            "Rewrites",
                            "Headers",
                            "Cookies",
                            "Authentication",
                            "Edge runtime",
                            "NextResponse API",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B10.2: Route Segment Config",
                        "description": "dynamic, dynamicParams, revalidate, fetchCache, runtime, preferredRegion options, and export options",
                        "topics": [
                            "dynamic option",
                            "dynamicParams option",
                            "revalidate option",
                            "fetchCache option",
                            "runtime option",
                            "preferredRegion option",
                            "Export options",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B10.3: Internationalization",
                        "description": "Manual i18n implementation, locale routing, locale switching, next-intl library, and next-i18next library",
                        "topics": [
                            "Manual i18n implementation",
                            "Locale routing",
                            "Locale switching",
                            "next-intl library",
                            "next-i18next library",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "B10.4: Redirects & Rewrites",
                        "description": "next.config.js redirects, next.config.js rewrites, conditional redirects, external redirects, and internal rewrites",
                        "topics": [
                            "next.config.js redirects",
                            "next.config.js rewrites",
                            "Conditional redirects",
                            "External redirects",
                            "Internal rewrites",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "B10.5: Environment Variables",
                        "description": "Public variables, server-only variables, runtime vs build-time, and TypeScript types",
                        "topics": [
                            "Public variables",
                            "Server-only variables",
                            "Runtime vs build-time",
                            "TypeScript types",
                        ],
                    },
                    {
                        "id": "lesson-6",
                        "order": 6,
                        "title": "B10.6: Draft Mode",
                        "description": "Enabling draft mode, disabling draft mode, draft API route, and preview content",
                        "topics": [
                            "Enabling draft mode",
                            "Disabling draft mode",
                            "Draft API route",
                            "Preview content",
                        ],
                    },
                ],
            },
            {
                "id": "b11",
                "title": "B11: Optimization",
                "summary": "Performance, caching, SEO, and optimization strategies",
                "description": (
                    "Master optimization techniques in Next.js App Router. Learn "
                    "performance optimization, caching strategies, and SEO best "
                    "practices to build fast, efficient, and discoverable web "
                    "applications."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B11.1: Performance",
                        "description": "Code splitting, dynamic imports, lazy loading, bundle analysis, tree shaking, and streaming optimization",
                        "topics": [
                            "Code splitting",
                            "Dynamic imports",
                            "Lazy loading",
                            "Bundle analysis",
                            "Tree shaking",
                            "Streaming optimization",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B11.2: Caching",
                        "description": "Fetch caching, Full Route Cache, Router Cache, Request Memoization, Data Cache, and cache invalidation",
                        "topics": [
                            "Fetch caching",
                            "Full Route Cache",
                            "Router Cache",
                            "Request Memoization",
                            "Data Cache",
                            "Cache invalidation",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B11.3: SEO",
                        "description": "Metadata optimization, structured data, sitemap generation, robots.txt, Open Graph, and Twitter Cards",
                        "topics": [
                            "Metadata optimization",
                            "Structured data",
                            "Sitemap generation",
                            "robots.txt",
                            "Open Graph",
                            "Twitter Cards",
                        ],
                    },
                ],
            },
            {
                "id": "b12",
                "title": "B12: Deployment",
                "summary": "Build process, deployment platforms, and production config",
                "description": (
                    "Master deployment in Next.js App Router. Learn the build process, "
                    "deployment platforms, and production configuration to deploy your "
                    "applications successfully."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B12.1: Build Process",
                        "description": "next build command, build output, static export, standalone output, and build analysis",
                        "topics": [
                            "next build command",
                            "Build output",
                            "Static export",
                            "Standalone output",
                            "Build analysis",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B12.2: Deployment Platforms",
                        "description": "Vercel deployment, self-hosting, Docker deployment, Node.js server, and static hosting",
                        "topics": [
                            "Vercel deployment",
                            "Self-hosting",
                            "Docker deployment",
                            "Node.js server",
                            "Static hosting",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B12.3: Production Configuration",
                        "description": "Environment variables, error tracking, analytics, monitoring, and performance budgets",
                        "topics": [
                            "Environment variables",
                            "Error tracking",
                            "Analytics",
                            "Monitoring",
                            "Performance budgets",
                        ],
                    },
                ],
            },
            {
                "id": "b13",
                "title": "B13: Interview Cheatsheet",
                "summary": "Complete interview preparation guide with quick reference, patterns, and Q&A",
                "description": (
                    "Comprehensive interview preparation guide covering all Next.js App "
                    "Router concepts, patterns, and best practices."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "B13.1: Core Concepts Quick Reference",
                        "description": "Essential Next.js App Router concepts, architecture, and key differences from Pages Router",
                        "topics": [
                            "Server vs Client Components",
                            "React Server Components (RSC)",
                            "Component Tree & Composition",
                            "File-based Routing System",
                            "Layouts & Nested Layouts",
                            "Special Files (loading, error, not-found)",
                            "Streaming & Suspense",
                            "Server Actions & Progressive Enhancement",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "B13.2: Data Fetching & Caching Cheatsheet",
                        "description": "Complete reference for data fetching patterns, caching strategies, and revalidation",
                        "topics": [
                            "Server Components Data Fetching",
                            "fetch API & Cache Options",
                            "Static vs Dynamic Rendering",
                            "Incremental Static Regeneration (ISR)",
                            "On-Demand Revalidation",
                            "Cache Tags & Cache Keys",
                            "Time-based Revalidation",
                            "Data Fetching Patterns & Best Practices",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "B13.3: Routing & Navigation Patterns",
                        "description": "Complete routing reference, dynamic routes, route groups, parallel routes, and intercepting routes",
                        "topics": [
                            "Static & Dynamic Routes",
                            "Route Groups & Organizing Routes",
                            "Dynamic Segments & Catch-all Routes",
                            "Parallel Routes & Slots",
                            "Intercepting Routes & Modals",
                            "Navigation Hooks (useRouter, usePathname, useSearchParams)",
                            "Link Component & Prefetching",
                            "Middleware & Route Protection",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "B13.4: Server Actions & Forms",
                        "description": "Server Actions reference, form handling, mutations, error handling, and progressive enhancement",
                        "topics": [
                            "Server Actions Basics",
                            "Form Actions & useFormState",
                            "useFormStatus Hook",
                            "Optimistic Updates",
                            "Revalidation Patterns",
                            "Error Handling & Validation",
                            "Progressive Enhancement",
                            "File Uploads & Mutations",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "B13.5: API Routes & Route Handlers",
                        "description": "Route handlers, HTTP methods, request/response handling, and API patterns",
                        "topics": [
                            "Route Handler Basics",
                            "HTTP Methods (GET, POST, PUT, DELETE, PATCH)",
                            "Request & Response APIs",
                            "Headers, Cookies, & Query Params",
                            "Streaming Responses",
                            "Route Segment Config",
                            "API Error Handling",
                            "Authentication & Authorization",
                        ],
                    },
                    {
                        "id": "lesson-6",
                        "order": 6,
                        "title": "B13.6: Metadata & SEO",
                        "description": "Static and dynamic metadata, SEO optimization, Open Graph, and social media tags",
                        "topics": [
                            "Metadata API Basics",
                            "Static Metadata",
                            "Dynamic Metadata & generateMetadata",
                            "Open Graph & Twitter Cards",
                            "Sitemap & Robots.txt",
                            "Structured Data (JSON-LD)",
                            "SEO Best Practices",
                            "Metadata Patterns & Templates",
                        ],
                    },
                    {
                        "id": "lesson-7",
                        "order": 7,
                        "title": "B13.7: Performance & Optimization",
                        "description": "Performance optimization strategies, code splitting, image optimization, and caching",
                        "topics": [
                            "Code Splitting & Bundle Optimization",
                            "Image Optimization (next/image)",
                            "Font Optimization (next/font)",
                            "Script Optimization (next/script)",
                            "Streaming & Partial Prerendering",
                            "Caching Strategies",
                            "Bundle Analyzer & Performance Metrics",
                            "Core Web Vitals Optimization",
                        ],
                    },
                    {
                        "id": "lesson-8",
                        "order": 8,
                        "title": "B13.8: Common Interview Questions & Answers",
                        "description": "Comprehensive collection of interview questions with detailed answers",
                        "topics": [
                            "App Router vs Pages Router",
                            "Server Components vs Client Components",
                            "When to use each rendering strategy",
                            "How caching works in Next.js",
                            "Server Actions vs API Routes",
                            "Middleware use cases",
                            "Error handling strategies",
                            "Performance optimization techniques",
                        ],
                    },
                    {
                        "id": "lesson-9",
                        "order": 9,
                        "title": "B13.9: Best Practices & Patterns",
                        "description": "Production-ready patterns, architecture decisions, and common pitfalls to avoid",
                        "topics": [
                            "Component Organization Patterns",
                            "Data Fetching Best Practices",
                            "Error Boundary Strategies",
                            "Loading State Patterns",
                            "Authentication Patterns",
                            "State Management Approaches",
                            "Type Safety with TypeScript",
                            "Common Pitfalls & How to Avoid Them",
                        ],
                    },
                    {
                        "id": "lesson-10",
                        "order": 10,
                        "title": "B13.10: Advanced Patterns & Real-World Scenarios",
                        "description": "Advanced use cases, edge cases, and solutions for complex scenarios",
                        "topics": [
                            "Authentication & Authorization",
                            "Internationalization (i18n)",
                            "Multi-tenant Applications",
                            "File Upload & Processing",
                            "Real-time Features",
                            "Analytics & Monitoring",
                            "Error Tracking & Logging",
                            "Testing Strategies",
                        ],
                    },
                    {
                        "id": "lesson-11",
                        "order": 11,
                        "title": "B13.11: Debugging Code Questions & Solutions",
                        "description": "Comprehensive collection of React & Next.js debugging scenarios with detailed explanations",
                        "topics": [
                            "Hooks in Server Components",
                            "Missing await and async pitfalls",
                            "useEffect dependencies and infinite loops",
                            "Hydration mismatch errors",
                            "Server Actions missing 'use server'",
                            "Route Handler export names",
                            "Suspense boundaries for useSearchParams",
                            "Client/server environment variable leaks",
                        ],
                    },
                ],
            },
        ],
    },

    # ═══════════════════════════ PAGES ROUTER ════════════════════════════════

    {
        "id": "pages-router",
        "title": "Pages Router Mastery",
        "nav_title": "Pages Router",
        "icon": "📄",
        "summary": "Master the Pages Router with getServerSideProps, getStaticProps, and all traditional Next.js patterns.",
        "description": "Complete guide to Next.js Pages Router. Every method, every concept covered.",
        "chapters": [
            {
                "id": "a1",
                "title": "A1: Foundation & Setup",
                "summary": "Project setup, structure, and core concepts",
                "description": (
                    "Learn the fundamentals of Next.js Pages Router setup and core "
                    "concepts."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A1.1: Project Setup",
                        "description": "Complete project setup with create-next-app, manual setup, project structure, configuration, and environment variables",
                        "topics": [
                            "create-next-app with Pages Router",
                            "Manual setup with pages/ directory",
                            "Project structure (pages/, public/, styles/, components/)",
                            "next.config.js configuration (all options)",
                            "Environment variables (.env.local, .env.development, .env.production)",
                            "TypeScript setup for Pages Router",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A1.2: Core Concepts",
                        "description": "File-based routing, automatic code splitting, pre-rendering concepts (SSG, SSR, ISR), client-side navigation, and production vs development builds",
                        "topics": [
                            "File-based routing in pages/",
                            "Automatic code splitting",
                            "Pre-rendering concepts (SSG, SSR, ISR)",
                            "Client-side navigation",
                            "Production vs development builds",
                        ],
                    },
                ],
            },
            {
                "id": "a2",
                "title": "A2: Routing System",
                "summary": "Complete routing system with pages, dynamic routes, and special files",
                "description": (
                    "Complete guide to Next.js Pages Router routing system with all "
                    "routing patterns and features."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A2.1: Basic Routing",
                        "description": "Index routes, nested routes, dynamic routes, catch-all routes, optional catch-all, and nested dynamic routes",
                        "topics": [
                            "Index routes (pages/index.js)",
                            "Nested routes (pages/about.js, pages/contact.js)",
                            "Dynamic routes (pages/[id].js)",
                            "Catch-all routes (pages/[...slug].js)",
                            "Optional catch-all routes (pages/[[...slug]].js)",
                            "Route groups with parentheses (not supported in Pages Router)",
                            "Nested dynamic routes (pages/posts/[id]/[comment].js)",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A2.2: Special Pages",
                        "description": "Custom App component, Document, error pages, 404, 500, and API directory structure",
                        "topics": [
                            "pages/_app.js (custom App component)",
                            "pages/_document.js (custom Document)",
                            "pages/_error.js (custom error page)",
                            "pages/404.js (custom 404)",
                            "pages/500.js (custom 500)",
                            "pages/api/ directory structure",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A2.3: Routing Features",
                        "description": "next/link component, next/router useRouter hook, programmatic navigation, route parameters, shallow routing, prefetching, and locale routing",
                        "topics": [
                            "next/link component (all props)",
                            "next/router - useRouter hook (all methods and properties)",
                            "Programmatic navigation (router.push, router.replace, router.back, router.reload)",
                            "Route parameters (router.query, router.asPath, router.pathname)",
                            "Shallow routing",
                            "Prefetching behavior",
                            "Locale routing (if i18n enabled)",
                        ],
                    },
                ],
            },
            {
                "id": "a3",
                "title": "A3: Data Fetching",
                "summary": "getServerSideProps, getStaticProps, getStaticPaths, and ISR",
                "description": (
                    "Complete guide to data fetching in Next.js Pages Router: SSR, SSG, "
                    "ISR, and client-side fetching."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A3.1: getServerSideProps",
                        "description": "Server-side rendering with getServerSideProps: context object, return values, error handling, authentication, API calls, database queries, and caching",
                        "topics": [
                            "Basic usage",
                            "Context object (params, req, res, query, preview, previewData, resolvedUrl, locale, locales, defaultLocale)",
                            "Return object (props, notFound, redirect)",
                            "Error handling",
                            "Authentication in getServerSideProps",
                            "API calls in getServerSideProps",
                            "Database queries",
                            "Caching behavior",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A3.2: getStaticProps",
                        "description": "Static site generation with getStaticProps: context, return values, ISR, revalidation strategies, preview mode, and TypeScript",
                        "topics": [
                            "Basic usage",
                            "Context object (params, preview, previewData, locale, locales, defaultLocale)",
                            "Return object (props, revalidate, notFound)",
                            "ISR (Incremental Static Regeneration)",
                            "Revalidation strategies (time-based, on-demand)",
                            "Preview mode",
                            "TypeScript types",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A3.3: getStaticPaths",
                        "description": "Dynamic static routes with getStaticPaths: paths generation, fallback modes, TypeScript, and combining with getStaticProps",
                        "topics": [
                            "Basic usage",
                            "Return object (paths, fallback)",
                            "Fallback modes: false, true, 'blocking'",
                            "Dynamic route generation",
                            "TypeScript types",
                            "Combining with getStaticProps",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "A3.4: getInitialProps (Legacy)",
                        "description": "Legacy data fetching method: usage in pages and _app.js, context object, and when to use vs avoid",
                        "topics": [
                            "Usage in pages",
                            "Usage in _app.js",
                            "Context object",
                            "When to use vs avoid",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "A3.5: Client-Side Data Fetching",
                        "description": "Client-side data fetching: useEffect with fetch, SWR, React Query, loading states, and error handling",
                        "topics": [
                            "useEffect with fetch",
                            "SWR integration",
                            "React Query integration",
                            "Data fetching libraries",
                            "Loading states",
                            "Error handling",
                        ],
                    },
                ],
            },
            {
                "id": "a4",
                "title": "A4: API Routes",
                "summary": "API routes, HTTP methods, and route handlers",
                "description": (
                    "Complete guide to building API routes in Next.js Pages Router. "
                    "Learn how to create RESTful APIs, handle requests, and implement "
                    "advanced features."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A4.1: API Route Basics",
                        "description": "File structure, route handlers for all HTTP methods, request/response objects, and TypeScript types",
                        "topics": [
                            "File structure (pages/api/)",
                            "Route handlers (all HTTP methods: GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS)",
                            "Request/Response objects",
                            "TypeScript types",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A4.2: API Route Features",
                        "description": "Dynamic routes, catch-all routes, middleware, CORS, authentication, file uploads, streaming, and Edge runtime",
                        "topics": [
                            "Dynamic API routes (pages/api/posts/[id].js)",
                            "Catch-all API routes (pages/api/[...params].js)",
                            "Optional catch-all (pages/api/[[...params]].js)",
                            "Middleware in API routes",
                            "CORS handling",
                            "Authentication in API routes",
                            "File uploads",
                            "Streaming responses",
                            "Edge runtime in API routes",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A4.3: API Route Patterns",
                        "description": "RESTful API design, error handling, response formatting, status codes, headers, cookies, and body parsing",
                        "topics": [
                            "RESTful API design",
                            "Error handling",
                            "Response formatting",
                            "Status codes",
                            "Headers manipulation",
                            "Cookies handling",
                            "Body parsing (JSON, form-data, text)",
                        ],
                    },
                ],
            },
            {
                "id": "a5",
                "title": "A5: Components & Features",
                "summary": "next/head, next/image, next/script, next/font",
                "description": (
                    "Master Next.js built-in components: next/head, next/image, "
                    "next/script, and next/font for optimal performance and SEO."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A5.1: next/head",
                        "description": "Head component for managing document head: meta tags, scripts, links, and conditional rendering",
                        "topics": [
                            "Head component usage",
                            "All meta tags (title, description, og tags, twitter cards, etc.)",
                            "Script tags in Head",
                            "Link tags in Head",
                            "Multiple Head components",
                            "Conditional rendering",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A5.2: next/image",
                        "description": "Image component with optimization, loading strategies, placeholders, responsive images, and more",
                        "topics": [
                            "Image component (all props)",
                            "Optimization features",
                            "Loading strategies (lazy, eager)",
                            "Placeholder (blur, empty)",
                            "Sizes and srcSet",
                            "Priority loading",
                            "External domains configuration",
                            "Image formats (WebP, AVIF)",
                            "Responsive images",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A5.3: next/script",
                        "description": "Script component for optimized script loading with different strategies and optimization",
                        "topics": [
                            "Script component",
                            "Loading strategies (beforeInteractive, afterInteractive, lazyOnload)",
                            "Inline scripts",
                            "External scripts",
                            "Script optimization",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "A5.4: next/font",
                        "description": "Font optimization with Google Fonts, local fonts, display strategies, variable fonts, and preloading",
                        "topics": [
                            "Font optimization",
                            "next/font/google",
                            "next/font/local",
                            "Font display strategies",
                            "Variable fonts",
                            "Font preloading",
                        ],
                    },
                ],
            },
            {
                "id": "a6",
                "title": "A6: Custom App & Document",
                "summary": "_app.js, _document.js, and custom configurations",
                "description": (
                    "Learn how to customize the App and Document components to add "
                    "global functionality, styles, and HTML structure."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A6.1: Custom _app.js",
                        "description": "Custom App component: structure, pageProps, global styles, layouts, state management, error boundaries, analytics, and getInitialProps",
                        "topics": [
                            "Component structure",
                            "pageProps handling",
                            "Global styles",
                            "Layout components",
                            "State management setup",
                            "Error boundaries",
                            "Analytics integration",
                            "getInitialProps in _app",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A6.2: Custom _document.js",
                        "description": "Custom Document: structure, Html/Head/Main/NextScript, HTML attributes, meta tags, scripts, styled-components, Emotion, and language attributes",
                        "topics": [
                            "Document structure",
                            "Html, Head, Main, NextScript components",
                            "Custom HTML attributes",
                            "Custom meta tags",
                            "Script injection",
                            "Styled-components setup",
                            "Emotion setup",
                            "Language attributes",
                        ],
                    },
                ],
            },
            {
                "id": "a7",
                "title": "A7: Styling",
                "summary": "CSS Modules, Tailwind, CSS-in-JS, and styling strategies",
                "description": (
                    "Complete guide to styling in Next.js Pages Router: CSS Modules, "
                    "Global CSS, CSS-in-JS, Sass/SCSS, and Tailwind CSS."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A7.1: CSS Modules",
                        "description": "Scoped CSS with CSS Modules: file naming, scoped styles, composition, and global styles",
                        "topics": [
                            "File naming (*.module.css)",
                            "Scoped styles",
                            "Composition",
                            "Global styles in modules",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A7.2: Global CSS",
                        "description": "Global stylesheets: importing, CSS reset, CSS variables, and dark mode",
                        "topics": [
                            "Importing global styles",
                            "CSS reset",
                            "CSS variables",
                            "Dark mode",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A7.3: CSS-in-JS",
                        "description": "CSS-in-JS solutions: styled-components, Emotion, Styled JSX, and theme providers",
                        "topics": [
                            "Styled-components",
                            "Emotion",
                            "Styled JSX (built-in)",
                            "Theme providers",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "A7.4: Sass/SCSS",
                        "description": "Sass/SCSS styling: setup, configuration, variables, mixins, and nested styles",
                        "topics": [
                            "Setup and configuration",
                            "Variables and mixins",
                            "Nested styles",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "A7.5: Tailwind CSS",
                        "description": "Tailwind CSS utility-first styling: setup, configuration, PurgeCSS, and custom utilities",
                        "topics": [
                            "Setup",
                            "Configuration",
                            "PurgeCSS",
                            "Custom utilities",
                        ],
                    },
                ],
            },
            {
                "id": "a8",
                "title": "A8: Advanced Features",
                "summary": "Middleware, i18n, preview mode, redirects, and rewrites",
                "description": (
                    "Advanced Next.js Pages Router features: middleware, "
                    "internationalization, preview mode, redirects, rewrites, and "
                    "environment variables."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A8.1: Middleware (Pages Router)",
                        "description": "Middleware for request/response manipulation, redirects, rewrites, headers, cookies, and authentication",
                        "topics": [
                            "File location (middleware.js)",
                            "Matcher configuration",
                            "Request/Response manipulation",
                            "Redirects and rewrites",
                            "Headers and cookies",
                            "Authentication",
                            "Edge runtime",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A8.2: Internationalization (i18n)",
                        "description": "Built-in i18n routing: locale detection, subdomain/domain routing, locale switching, and data fetching with locales",
                        "topics": [
                            "Built-in i18n routing",
                            "Locale detection",
                            "Subdomain and domain routing",
                            "Locale switching",
                            "getStaticProps with locales",
                            "getServerSideProps with locales",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A8.3: Preview Mode",
                        "description": "Preview mode for draft content: enabling/disabling, preview API route, and getStaticProps with preview",
                        "topics": [
                            "Enabling preview mode",
                            "Disabling preview mode",
                            "Preview API route",
                            "getStaticProps with preview",
                            "Draft content handling",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "A8.4: Redirects & Rewrites",
                        "description": "URL redirects and rewrites: next.config.js configuration, conditional redirects, and external/internal routing",
                        "topics": [
                            "next.config.js redirects",
                            "next.config.js rewrites",
                            "Conditional redirects",
                            "External redirects",
                            "Internal rewrites",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "A8.5: Environment Variables",
                        "description": "Environment variables: public vs server-only, runtime vs build-time, and TypeScript types",
                        "topics": [
                            "Public variables (NEXT_PUBLIC_*)",
                            "Server-only variables",
                            "Runtime vs build-time",
                            "TypeScript types",
                        ],
                    },
                ],
            },
            {
                "id": "a9",
                "title": "A9: Optimization",
                "summary": "Performance, caching, SEO, and optimization strategies",
                "description": (
                    "Performance optimization, caching strategies, and SEO best "
                    "practices for Next.js Pages Router applications."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A9.1: Performance",
                        "description": "Code splitting, dynamic imports, lazy loading, bundle analysis, webpack configuration, and tree shaking",
                        "topics": [
                            "Code splitting",
                            "Dynamic imports",
                            "Lazy loading components",
                            "Bundle analysis",
                            "Webpack configuration",
                            "Tree shaking",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A9.2: Caching",
                        "description": "Static page caching, API route caching, ISR caching, CDN caching, and browser caching strategies",
                        "topics": [
                            "Static page caching",
                            "API route caching",
                            "ISR caching",
                            "CDN caching",
                            "Browser caching",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A9.3: SEO",
                        "description": "Meta tags optimization, structured data, sitemap generation, robots.txt, Open Graph, and Twitter Cards",
                        "topics": [
                            "Meta tags optimization",
                            "Structured data",
                            "Sitemap generation",
                            "robots.txt",
                            "Open Graph",
                            "Twitter Cards",
                        ],
                    },
                ],
            },
            {
                "id": "a10",
                "title": "A10: Deployment",
                "summary": "Build process, deployment platforms, and production config",
                "description": (
                    "Complete guide to building and deploying Next.js Pages Router "
                    "applications: build process, deployment platforms, and production "
                    "configuration."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A10.1: Build Process",
                        "description": "next build command, build output, static export, standalone output, and build analysis",
                        "topics": [
                            "next build command",
                            "Build output",
                            "Static export (output: 'export')",
                            "Standalone output",
                            "Build analysis",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A10.2: Deployment Platforms",
                        "description": "Vercel deployment, self-hosting, Docker deployment, Node.js server, and static hosting",
                        "topics": [
                            "Vercel deployment",
                            "Self-hosting",
                            "Docker deployment",
                            "Node.js server",
                            "Static hosting",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A10.3: Production Configuration",
                        "description": "Environment variables, error tracking, analytics, monitoring, and performance budgets",
                        "topics": [
                            "Environment variables",
                            "Error tracking",
                            "Analytics",
                            "Monitoring",
                            "Performance budgets",
                        ],
                    },
                ],
            },
            {
                "id": "a11",
                "title": "A11: Interview Cheatsheet",
                "summary": "Complete interview preparation guide with quick reference, patterns, and Q&A",
                "description": (
                    "Comprehensive interview preparation guide covering all Next.js "
                    "Pages Router concepts, patterns, and best practices."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "A11.1: Core Concepts Quick Reference",
                        "description": "Essential Next.js Pages Router concepts, file-based routing, and pre-rendering strategies",
                        "topics": [
                            "File-based Routing System",
                            "Static Site Generation (SSG)",
                            "Server-Side Rendering (SSR)",
                            "Incremental Static Regeneration (ISR)",
                            "Client-Side Rendering (CSR)",
                            "Automatic Code Splitting",
                            "Custom App (_app.js)",
                            "Custom Document (_document.js)",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "A11.2: Data Fetching Methods Cheatsheet",
                        "description": "Complete reference for getStaticProps, getServerSideProps, getStaticPaths, and data fetching patterns",
                        "topics": [
                            "getStaticProps (SSG)",
                            "getServerSideProps (SSR)",
                            "getStaticPaths (Dynamic Routes)",
                            "Incremental Static Regeneration (ISR)",
                            "Context Parameter",
                            "Return Values & Types",
                            "Data Fetching Patterns",
                            "When to use each method",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "A11.3: Routing & Navigation Patterns",
                        "description": "Routing reference, dynamic routes, catch-all routes, optional catch-all, and navigation",
                        "topics": [
                            "Static Routes",
                            "Dynamic Routes [id]",
                            "Catch-all Routes [...slug]",
                            "Optional Catch-all [[...slug]]",
                            "Link Component & Prefetching",
                            "useRouter Hook",
                            "Programmatic Navigation",
                            "Route Protection Patterns",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "A11.4: API Routes Reference",
                        "description": "API routes, HTTP methods, request/response handling, and middleware patterns",
                        "topics": [
                            "API Route Basics",
                            "HTTP Methods (GET, POST, PUT, DELETE, PATCH)",
                            "Request & Response Objects",
                            "Dynamic API Routes",
                            "API Route Middleware",
                            "Error Handling",
                            "Authentication & Authorization",
                            "Body Parsing & Validation",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "A11.5: Custom App & Document",
                        "description": "_app.js, _document.js, page initialization, global styles, and custom configuration",
                        "topics": [
                            "_app.js Structure & Use Cases",
                            "Page Props & getInitialProps",
                            "Global Error Handling",
                            "_document.js Structure",
                            "Custom HTML Structure",
                            "Font Optimization",
                            "CSS-in-JS Setup",
                            "Analytics & Third-party Scripts",
                        ],
                    },
                    {
                        "id": "lesson-6",
                        "order": 6,
                        "title": "A11.6: Head & Metadata Management",
                        "description": "next/head usage, SEO optimization, dynamic meta tags, and Open Graph",
                        "topics": [
                            "next/head Component",
                            "Static Meta Tags",
                            "Dynamic Meta Tags",
                            "Open Graph Tags",
                            "Twitter Cards",
                            "Structured Data",
                            "SEO Best Practices",
                            "Meta Tag Patterns",
                        ],
                    },
                    {
                        "id": "lesson-7",
                        "order": 7,
                        "title": "A11.7: Performance & Optimization",
                        "description": "Performance optimization, code splitting, image optimization, and caching strategies",
                        "topics": [
                            "Automatic Code Splitting",
                            "Dynamic Imports & Lazy Loading",
                            "Image Optimization (next/image)",
                            "Font Optimization (next/font)",
                            "Script Optimization (next/script)",
                            "Static Export",
                            "Bundle Analyzer",
                            "Performance Monitoring",
                        ],
                    },
                    {
                        "id": "lesson-8",
                        "order": 8,
                        "title": "A11.8: Common Interview Questions & Answers",
                        "description": "Comprehensive collection of interview questions with detailed answers",
                        "topics": [
                            "SSG vs SSR vs ISR",
                            "When to use getStaticProps vs getServerSideProps",
                            "getStaticPaths explained",
                            "API Routes vs Serverless Functions",
                            "Custom App vs Custom Document",
                            "Middleware use cases",
                            "Performance optimization techniques",
                            "Migration to App Router considerations",
                        ],
                    },
                    {
                        "id": "lesson-9",
                        "order": 9,
                        "title": "A11.9: Best Practices & Patterns",
                        "description": "Production-ready patterns, architecture decisions, and common pitfalls",
                        "topics": [
                            "Project Structure Best Practices",
                            "Data Fetching Patterns",
                            "Error Handling Strategies",
                            "Loading State Patterns",
                            "Authentication Patterns",
                            "State Management Approaches",
                            "Type Safety with TypeScript",
                            "Common Pitfalls & Solutions",
                        ],
                    },
                    {
                        "id": "lesson-10",
                        "order": 10,
                        "title": "A11.10: Advanced Patterns & Real-World Scenarios",
                        "description": "Advanced use cases, edge cases, and solutions for complex scenarios",
                        "topics": [
                            "Authentication & Session Management",
                            "Internationalization (i18n)",
                            "Preview Mode",
                            "Redirects & Rewrites",
                            "Middleware & Edge Functions",
                            "Multi-zone Deployments",
                            "Analytics & Monitoring",
                            "Testing Strategies",
                        ],
                    },
                ],
            },
        ],
    },

    # ═══════════════════════════ COMPARISON ══════════════════════════════════

    {
        "id": "comparison",
        "title": "Comparison & Common Features",
        "nav_title": "Comparison & Common Features",
        "icon": "🔄",
        "summary": "Learn about features that work the same in both App Router and Pages Router.",
        "description": "Learn about features that work in both routers and understand the key differences between App Router and Pages Router.",
        "chapters": [
            {
                "id": "c1",
                "title": "C1: Common Features (Work in Both)",
                "summary": "Features that work the same way in both App Router and Pages Router",
                "description": (
                    "Learn about features that work the same way in both App Router and "
                    "Pages Router. These are the shared APIs and configurations that "
                    "make transitioning between routers easier."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "C1.1: next/image",
                        "description": "Image optimization component - same API works in both App Router and Pages Router",
                        "topics": [
                            "Same API in both routers",
                            "Image optimization",
                            "Props and features",
                            "Usage examples",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "C1.2: next/script",
                        "description": "Script optimization component - same API works in both App Router and Pages Router",
                        "topics": [
                            "Same API in both routers",
                            "Loading strategies",
                            "Script optimization",
                            "Usage examples",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "C1.3: next/font",
                        "description": "Font optimization - same API works in both App Router and Pages Router",
                        "topics": [
                            "Same API in both routers",
                            "Font optimization",
                            "Google fonts and local fonts",
                            "Usage examples",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "C1.4: next.config.js",
                        "description": "Next.js configuration - same options work in both App Router and Pages Router",
                        "topics": [
                            "Same configuration options",
                            "Common settings",
                            "Router-specific options",
                            "Configuration examples",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "C1.5: Middleware",
                        "description": "Middleware API - same functionality, different routing context",
                        "topics": [
                            "Same API",
                            "Different routing context",
                            "Request/Response manipulation",
                            "Usage in both routers",
                        ],
                    },
                    {
                        "id": "lesson-6",
                        "order": 6,
                        "title": "C1.6: Environment Variables",
                        "description": "Environment variables - same behavior in both App Router and Pages Router",
                        "topics": [
                            "Same behavior",
                            "NEXT_PUBLIC_ prefix",
                            "Server-only variables",
                            "Configuration",
                        ],
                    },
                    {
                        "id": "lesson-7",
                        "order": 7,
                        "title": "C1.7: Styling",
                        "description": "Styling approaches - same methods work in both App Router and Pages Router",
                        "topics": [
                            "CSS Modules",
                            "Global CSS",
                            "CSS-in-JS",
                            "Tailwind CSS",
                            "Sass/SCSS",
                        ],
                    },
                    {
                        "id": "lesson-8",
                        "order": 8,
                        "title": "C1.8: Deployment",
                        "description": "Deployment process - same build and deployment steps for both routers",
                        "topics": [
                            "Same build process",
                            "Deployment platforms",
                            "Production configuration",
                            "Platform-specific notes",
                        ],
                    },
                    {
                        "id": "lesson-9",
                        "order": 9,
                        "title": "C1.9: Optimization",
                        "description": "Optimization strategies - similar concepts with different implementations",
                        "topics": [
                            "Performance optimization",
                            "Caching strategies",
                            "SEO optimization",
                            "Router-specific differences",
                        ],
                    },
                ],
            },
            {
                "id": "c2",
                "title": "C2: Key Differences",
                "summary": "Understand the key differences between App Router and Pages Router",
                "description": (
                    "Understand the key differences between App Router and Pages Router. "
                    "Learn when to use each approach and how they differ in "
                    "implementation."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "C2.1: Routing",
                        "description": "File-based routing differences: Pages Router uses pages/, App Router uses app/ with special files",
                        "topics": [
                            "Pages Router: File-based in pages/",
                            "App Router: File-based in app/ with special files",
                            "Route structure differences",
                            "Special file differences",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "C2.2: Data Fetching",
                        "description": "Different data fetching approaches: getServerSideProps/getStaticProps vs async Server Components and Server Actions",
                        "topics": [
                            "Pages Router: getServerSideProps, getStaticProps, getStaticPaths",
                            "App Router: Async Server Components, Server Actions, fetch with caching",
                            "When to use each approach",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "C2.3: Navigation",
                        "description": "Navigation API differences: next/router vs next/navigation",
                        "topics": [
                            "Pages Router: next/router (useRouter)",
                            "App Router: next/navigation (useRouter, usePathname, useSearchParams, useParams)",
                            "API differences",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "C2.4: Layouts",
                        "description": "Layout system differences: _app.js/_document.js vs layout.js files",
                        "topics": [
                            "Pages Router: Custom _app.js and _document.js",
                            "App Router: layout.js files at any level",
                            "Nested layouts",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "C2.5: Metadata",
                        "description": "Metadata handling: next/head vs Metadata API",
                        "topics": [
                            "Pages Router: next/head component",
                            "App Router: Metadata API (static and generateMetadata)",
                            "SEO differences",
                        ],
                    },
                    {
                        "id": "lesson-6",
                        "order": 6,
                        "title": "C2.6: Loading States",
                        "description": "Loading state handling: manual vs automatic with loading.js",
                        "topics": [
                            "Pages Router: Manual with getServerSideProps/getStaticProps",
                            "App Router: loading.js files with Suspense",
                            "Loading UI patterns",
                        ],
                    },
                    {
                        "id": "lesson-7",
                        "order": 7,
                        "title": "C2.7: Error Handling",
                        "description": "Error handling differences: _error.js vs error.js and not-found.js",
                        "topics": [
                            "Pages Router: _error.js and custom 404/500",
                            "App Router: error.js and not-found.js files",
                            "Error boundary differences",
                        ],
                    },
                    {
                        "id": "lesson-8",
                        "order": 8,
                        "title": "C2.8: API Routes",
                        "description": "API route differences: pages/api/ vs app/api/route.js",
                        "topics": [
                            "Pages Router: pages/api/ with default export",
                            "App Router: app/api/route.js with named exports",
                            "Route handler differences",
                        ],
                    },
                    {
                        "id": "lesson-9",
                        "order": 9,
                        "title": "C2.9: Special Features",
                        "description": "Special features unique to each router",
                        "topics": [
                            "Pages Router: Shallow routing, getInitialProps",
                            "App Router: Server Actions, Streaming, Parallel Routes, Intercepting Routes",
                            "Feature comparison",
                        ],
                    },
                ],
            },
            {
                "id": "c3",
                "title": "C3: Migration Considerations",
                "summary": "Learn when to use each router, migration strategies, and coexistence patterns",
                "description": (
                    "Learn when to use each router, how to migrate between them, and how "
                    "to run both routers in the same application."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "C3.1: When to use Pages Router",
                        "description": "Understand when Pages Router is the right choice for your project",
                        "topics": [
                            "Legacy projects",
                            "Built-in i18n requirements",
                            "Shallow routing needs",
                            "getInitialProps usage",
                            "Stability and maturity",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "C3.2: When to use App Router",
                        "description": "Understand when App Router is the right choice for your project",
                        "topics": [
                            "New projects",
                            "Server Components benefits",
                            "Server Actions needs",
                            "Streaming requirements",
                            "Modern React features",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "C3.3: Migration Strategies",
                        "description": "Learn how to migrate from Pages Router to App Router",
                        "topics": [
                            "Incremental migration",
                            "Route-by-route migration",
                            "Data fetching migration",
                            "API routes migration",
                            "Best practices",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "C3.4: Coexistence Patterns",
                        "description": "Run both routers in the same Next.js application",
                        "topics": [
                            "Running both routers",
                            "Gradual migration",
                            "Shared components",
                            "Configuration",
                            "Common patterns",
                        ],
                    },
                ],
            },
        ],
    },

    # ═══════════════════════════ RECENT UPDATES ══════════════════════════════

    {
        "id": "recent-updates",
        "title": "Recent Updates",
        "nav_title": "Recent Updates",
        "icon": "🆕",
        "summary": "Stay up-to-date with the latest Next.js features, version updates, and new concepts.",
        "description": "Stay current with the latest Next.js features, version updates, and new concepts not covered in the main learning paths.",
        "chapters": [
            {
                "id": "v16",
                "title": "Next.js 16 - New Features & Changes",
                "summary": "Learn about all the new features, methods, and concepts introduced in Next.js 16",
                "description": (
                    "Comprehensive guide to all new features, methods, and concepts "
                    "introduced in Next.js 16 that are not covered in the main learning "
                    "paths."
                ),
                "lessons": [
                    {
                        "id": "lesson-1",
                        "order": 1,
                        "title": "V16.1: Cache Components & 'use cache' Directive",
                        "description": "New explicit caching mechanism with the 'use cache' directive for pages, components, and functions",
                        "topics": [
                            "Understanding 'use cache' directive",
                            "Caching pages and components",
                            "Cache configuration options",
                            "Cache boundaries and composition",
                            "Integration with Partial Pre-Rendering (PPR)",
                            "Best practices for cache components",
                        ],
                    },
                    {
                        "id": "lesson-2",
                        "order": 2,
                        "title": "V16.2: Proxy.ts - Middleware Replacement",
                        "description": "New proxy.ts replaces middleware.ts, making network boundaries explicit and running on Node.js runtime",
                        "topics": [
                            "Migration from middleware.ts to proxy.ts",
                            "Proxy.ts function signature",
                            "Request/response handling",
                            "Network boundary concepts",
                            "Runtime differences (Node.js vs Edge)",
                            "Migration guide and examples",
                        ],
                    },
                    {
                        "id": "lesson-3",
                        "order": 3,
                        "title": "V16.3: Enhanced Caching APIs",
                        "description": "Improved caching APIs including updateTag(), revalidateTag() with cacheLife, and refresh()",
                        "topics": [
                            "updateTag() for read-your-writes semantics",
                            "revalidateTag() with cacheLife parameter",
                            "refresh() for dynamic data updates",
                            "Stale-while-revalidate patterns",
                            "Cache invalidation strategies",
                            "Server Actions integration",
                        ],
                    },
                    {
                        "id": "lesson-4",
                        "order": 4,
                        "title": "V16.4: Turbopack as Default Bundler",
                        "description": "Turbopack is now the default bundler with significant performance improvements and filesystem caching",
                        "topics": [
                            "Turbopack performance benefits",
                            "Production build improvements (2-5x faster)",
                            "Fast Refresh improvements (10x faster)",
                            "Filesystem caching configuration",
                            "Migration from Webpack",
                            "Turbopack-specific features",
                        ],
                    },
                    {
                        "id": "lesson-5",
                        "order": 5,
                        "title": "V16.5: Smart Routing & Prefetching Enhancements",
                        "description": "Layout deduplication, incremental prefetching, and smarter route optimization",
                        "topics": [
                            "Layout deduplication concepts",
                            "Incremental prefetching",
                            "Prefetch optimization strategies",
                            "Network load reduction",
                            "Navigation performance improvements",
                            "Prefetch configuration options",
                        ],
                    },
                    {
                        "id": "lesson-6",
                        "order": 6,
                        "title": "V16.6: React 19.2 Integration & Features",
                        "description": "Next.js 16 compatibility with React 19.2, including View Transitions API, useEffectEvent, and Activity component",
                        "topics": [
                            "View Transitions API for page transitions",
                            "useEffectEvent() hook usage",
                            "<Activity /> component for background UI",
                            "React 19.2 specific features",
                            "Migration considerations",
                            "Performance improvements",
                        ],
                    },
                    {
                        "id": "lesson-7",
                        "order": 7,
                        "title": "V16.7: Build Adapters API (Alpha)",
                        "description": "New Build Adapters API for custom deployment targets beyond Vercel",
                        "topics": [
                            "Build Adapters API overview",
                            "Custom deployment targets",
                            "Cloudflare Workers adapter",
                            "Deno and Bun adapters",
                            "Custom infrastructure deployment",
                            "Adapter configuration and setup",
                        ],
                    },
                    {
                        "id": "lesson-8",
                        "order": 8,
                        "title": "V16.8: Breaking Changes & Migration Guide",
                        "description": "Breaking changes, removals, and comprehensive migration guide from Next.js 15 to 16",
                        "topics": [
                            "AMP support removal",
                            "Middleware to Proxy.ts migration",
                            "API changes and deprecations",
                            "Caching behavior changes",
                            "Step-by-step migration guide",
                            "Common issues and solutions",
                        ],
                    },
                ],
            },
        ],
    },
]
