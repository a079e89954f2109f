"""Router renderer"""

from core.interfaces import ArtifactRenderer
from core.models import GeneratedFile
from utils.naming import pascal_case, plural_route_segment, route_segment
from .base import dedent_block


class RoutesRenderer(ArtifactRenderer):
    """
    Browser router for every model.

    Every model gets a listing route. Only page (non-popup) models get
    create/edit routes; popup models edit inside their listing page.
    """

    @property
    def name(self) -> str:
        return "routes"

    def render(self, models):
        imports = []
        routes = []
        for model in models.values():
            pascal = pascal_case(model.name)
            imports.append(
                f"import {{ {pascal}DataTable }} from '../pages/{pascal}/{pascal}DataTable';"
            )
            routes.append(
                f"      // {pascal} ({'popup' if model.is_popup else 'page'} CRUD)\n"
                f"      {{ path: \"/{plural_route_segment(model.name)}\", element: <{pascal}DataTable /> }},"
            )
            if not model.is_popup:
                imports.append(
                    f"import {{ {pascal}Form }} from '../pages/{pascal}/{pascal}Form';"
                )
                segment = route_segment(model.name)
                routes.append(
                    f"      {{ path: \"/{segment}/create\", element: <{pascal}Form /> }},\n"
                    f"      {{ path: \"/{segment}/edit/:id\", element: <{pascal}Form /> }},"
                )

        import_block = "\n".join(imports)
        route_block = "\n".join(routes)
        content = dedent_block(f"""
import {{ createBrowserRouter }} from 'react-router-dom';
import DashboardLayout from '../layout/DashboardLayout';
import Dashboard from '../pages/Dashboard';
import {{ LoginPage }} from '../pages/Auth/LoginPage';
import {{ RequireAuth }} from '../context/AuthContext';
{import_block}

const routes = [
  {{
    path: "/login",
    element: <LoginPage />
  }},
  {{
    path: "/",
    element: (
      <RequireAuth>
        <DashboardLayout />
      </RequireAuth>
    ),
    children: [
      {{ index: true, element: <Dashboard /> }},
{route_block}
    ]
  }}
];

export default createBrowserRouter(routes);
""")
        return [GeneratedFile(path="src/routes/routes.tsx", content=content)]
