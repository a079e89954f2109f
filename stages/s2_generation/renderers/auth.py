"""Auth renderers: context provider and login page"""

from core.interfaces import ArtifactRenderer
from core.models import GeneratedFile
from .base import dedent_block, js


class AuthContextRenderer(ArtifactRenderer):

    @property
    def name(self) -> str:
        return "auth_context"

    def render(self, models):
        content = dedent_block("""
import React, { createContext, useContext, useState } from "react";
import { Navigate, useLocation } from "react-router-dom";
import { apiService } from "@/services/apiService";

const TOKEN_KEY = "auth_token";

interface AuthContextValue {
  token: string | null;
  isAuthenticated: boolean;
  login: (email: string, password: string) => Promise<boolean>;
  logout: () => void;
}

const AuthContext = createContext<AuthContextValue | undefined>(undefined);

export function AuthProvider({ children }: { children: React.ReactNode }) {
  const [token, setToken] = useState<string | null>(() => localStorage.getItem(TOKEN_KEY));

  const login = async (email: string, password: string) => {
    const [data, error] = await apiService.post<{ token: string }>("/auth/login", { email, password });
    if (error || !data) return false;
    localStorage.setItem(TOKEN_KEY, data.token);
    setToken(data.token);
    return true;
  };

  const logout = () => {
    localStorage.removeItem(TOKEN_KEY);
    setToken(null);
  };

  return (
    <AuthContext.Provider value={{ token, isAuthenticated: !!token, login, logout }}>
      {children}
    </AuthContext.Provider>
  );
}

export function useAuth(): AuthContextValue {
  const context = useContext(AuthContext);
  if (!context) {
    throw new Error("useAuth must be used within an AuthProvider");
  }
  return context;
}

export function RequireAuth({ children }: { children: React.ReactNode }) {
  const { isAuthenticated } = useAuth();
  const location = useLocation();
  if (!isAuthenticated) {
    return <Navigate to="/login" state={{ from: location }} replace />;
  }
  return <>{children}</>;
}
""")
        return [GeneratedFile(path="src/context/AuthContext.tsx", content=content)]


class LoginRenderer(ArtifactRenderer):

    def __init__(self, app_title: str = "Admin Panel"):
        self.app_title = app_title

    @property
    def name(self) -> str:
        return "login"

    def render(self, models):
        content = dedent_block(f"""
import {{ useState }} from "react";
import {{ useNavigate }} from "react-router-dom";
import {{ useForm }} from "react-hook-form";
import {{ zodResolver }} from "@hookform/resolvers/zod";
import {{ z }} from "zod";
import {{ useTranslation }} from "react-i18next";
import {{ Button }} from "@/components/ui/button";
import {{ Card, CardContent, CardHeader, CardTitle }} from "@/components/ui/card";
import {{ Form, FormControl, FormField, FormItem, FormLabel, FormMessage }} from "@/components/ui/form";
import {{ Input }} from "@/components/ui/input";
import {{ useAuth }} from "@/context/AuthContext";

const loginSchema = z.object({{
  email: z.string().email("Enter a valid email"),
  password: z.string().min(6, "Password must be at least 6 characters"),
}});

type LoginValues = z.infer<typeof loginSchema>;

export function LoginPage() {{
  const {{ t }} = useTranslation();
  const navigate = useNavigate();
  const {{ login }} = useAuth();
  const [error, setError] = useState<string | null>(null);
  const form = useForm<LoginValues>({{
    resolver: zodResolver(loginSchema),
    defaultValues: {{ email: "", password: "" }},
  }});

  async function onSubmit(values: LoginValues) {{
    setError(null);
    const ok = await login(values.email, values.password);
    if (ok) {{
      navigate("/");
    }} else {{
      setError(t("login.failed", "Invalid email or password"));
    }}
  }}

  return (
    <div className="min-h-screen flex items-center justify-center bg-background p-4">
      <Card className="w-full max-w-sm">
        <CardHeader>
          <CardTitle className="text-2xl text-center">{{{js(self.app_title)}}}</CardTitle>
        </CardHeader>
        <CardContent>
          <Form {{...form}}>
            <form onSubmit={{form.handleSubmit(onSubmit)}} className="space-y-4">
              <FormField control={{form.control}} name="email" render={{({{ field }}) => (
                <FormItem>
                  <FormLabel>{{t("login.email", "Email")}}</FormLabel>
                  <FormControl><Input type="email" {{...field}} /></FormControl>
                  <FormMessage />
                </FormItem>
              )}} />
              <FormField control={{form.control}} name="password" render={{({{ field }}) => (
                <FormItem>
                  <FormLabel>{{t("login.password", "Password")}}</FormLabel>
                  <FormControl><Input type="password" {{...field}} /></FormControl>
                  <FormMessage />
                </FormItem>
              )}} />
              {{error && <p className="text-sm text-destructive">{{error}}</p>}}
              <Button type="submit" className="w-full">{{t("login.submit", "Sign in")}}</Button>
            </form>
          </Form>
        </CardContent>
      </Card>
    </div>
  );
}}
""")
        return [GeneratedFile(path="src/pages/Auth/LoginPage.tsx", content=content)]
