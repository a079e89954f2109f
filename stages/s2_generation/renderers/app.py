"""Application entry renderers: main.tsx, App.tsx and the API client"""

from core.interfaces import ArtifactRenderer
from core.models import GeneratedFile
from .base import dedent_block, js


class AppEntryRenderer(ArtifactRenderer):
    """main.tsx and App.tsx wiring router, i18n, redux store, auth and theme"""

    @property
    def name(self) -> str:
        return "app_entry"

    def render(self, models):
        main_tsx = dedent_block("""
import React from "react";
import ReactDOM from "react-dom/client";
import App from "./App.tsx";
import "./index.css";

ReactDOM.createRoot(document.getElementById("root")!).render(
  <React.StrictMode>
    <App />
  </React.StrictMode>,
);
""")
        app_tsx = dedent_block("""
import React from "react";
import { I18nextProvider } from "react-i18next";
import { Provider } from "react-redux";
import { RouterProvider } from "react-router-dom";
import i18n from "./i18n";
import routes from "@/routes/routes";
import store from "@/store";
import { ThemeProvider } from "@/components/theme-provider";
import { AuthProvider } from "@/context/AuthContext";

function App() {
  return (
    <React.Suspense fallback="Loading...">
      <I18nextProvider i18n={i18n}>
        <Provider store={store}>
          <AuthProvider>
            <ThemeProvider defaultTheme="system" storageKey="vite-ui-theme">
              <RouterProvider router={routes} />
            </ThemeProvider>
          </AuthProvider>
        </Provider>
      </I18nextProvider>
    </React.Suspense>
  );
}

export default App;
""")
        return [
            GeneratedFile(path="src/main.tsx", content=main_tsx),
            GeneratedFile(path="src/App.tsx", content=app_tsx),
        ]


class ApiServiceRenderer(ArtifactRenderer):
    """Axios instance, [data, error] tuple wrappers and .env.example"""

    def __init__(self, base_url: str = "http://localhost:5000/api"):
        self.base_url = base_url

    @property
    def name(self) -> str:
        return "api_service"

    def render(self, models):
        api_ts = dedent_block(f"""
import axios from "axios";

const api = axios.create({{
  baseURL: import.meta.env.VITE_API_BASE_URL ?? {js(self.base_url)},
  headers: {{ "Content-Type": "application/json" }},
}});

api.interceptors.request.use((config) => {{
  const token = localStorage.getItem("auth_token");
  if (token) {{
    config.headers.Authorization = `Bearer ${{token}}`;
  }}
  return config;
}});

export default api;
""")
        service_ts = dedent_block("""
import api from "@/lib/api";

/**
 * Every call resolves to [data, null] on success or [null, error] on failure.
 */
export type ServiceResponse<T> = [T | null, unknown | null];

async function call<T>(request: () => Promise<{ data: T }>, label: string): Promise<ServiceResponse<T>> {
  try {
    const response = await request();
    return [response.data, null];
  } catch (error) {
    console.error(`API ${label} Error:`, error);
    return [null, error];
  }
}

const get = <T>(url: string, params?: object) => call<T>(() => api.get<T>(url, { params }), "GET");
const post = <T>(url: string, data: object) => call<T>(() => api.post<T>(url, data), "POST");
const put = <T>(url: string, data: object) => call<T>(() => api.put<T>(url, data), "PUT");
const patch = <T>(url: string, data: object) => call<T>(() => api.patch<T>(url, data), "PATCH");
const del = <T>(url: string) => call<T>(() => api.delete<T>(url), "DELETE");

export const apiService = { get, post, put, patch, del };
""")
        env_example = dedent_block(f"""
# Copy to .env.local and point at the backend API
VITE_API_BASE_URL={self.base_url}
""")
        return [
            GeneratedFile(path="src/lib/api.ts", content=api_ts),
            GeneratedFile(path="src/services/apiService.ts", content=service_ts),
            GeneratedFile(path=".env.example", content=env_example),
        ]
