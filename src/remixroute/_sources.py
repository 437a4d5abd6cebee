"""Route file templates — plain Python strings for ``remixroute create``.

No template engine here.  Simple ``str.format()`` substitution with
``{component_name}`` for the derived identifier and ``{route_name}`` for
the raw name.  Literal JSX/TS braces are doubled.
"""

# ---------------------------------------------------------------------------
# Page route
# ---------------------------------------------------------------------------

PAGE_TSX = """\
import type {{ MetaFunction }} from "@remix-run/node";

export const meta: MetaFunction = () => {{
  return [
    {{ title: "{component_name}" }},
    {{ name: "description", content: "Welcome to Remix!" }},
  ];
}};

export default function {component_name}() {{
  return (
    <div>
      <h1>{component_name}</h1>
    </div>
  );
}}
"""

# ---------------------------------------------------------------------------
# Resource route (loader + action, no UI)
# ---------------------------------------------------------------------------

RESOURCE_TSX = """\
import type {{ ActionFunctionArgs, LoaderFunctionArgs }} from "@remix-run/node";
import {{ json }} from "@remix-run/node";

export async function loader({{ request }}: LoaderFunctionArgs) {{
  return json({{ message: "Hello from {route_name}" }});
}}

export async function action({{ request }}: ActionFunctionArgs) {{
  // Handle POST, PUT, DELETE requests
  return json({{ success: true }});
}}
"""

# ---------------------------------------------------------------------------
# Layout route
# ---------------------------------------------------------------------------

LAYOUT_TSX = """\
import {{ Outlet }} from "@remix-run/react";

export default function {component_name}() {{
  return (
    <div>
      <header>
        <h1>{component_name} Layout</h1>
      </header>
      <main>
        <Outlet />
      </main>
    </div>
  );
}}
"""

# ---------------------------------------------------------------------------
# Error boundary route
# ---------------------------------------------------------------------------

ERROR_TSX = """\
import {{ useRouteError }} from "@remix-run/react";

export default function {component_name}() {{
  return (
    <div>
      <h1>{component_name}</h1>
    </div>
  );
}}

export function ErrorBoundary() {{
  const error = useRouteError();
  return (
    <div>
      <h1>Error</h1>
      <p>{{error.message}}</p>
    </div>
  );
}}
"""
