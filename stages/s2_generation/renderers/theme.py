"""Theming renderers: CSS variables, theme provider and toggle"""

from core.interfaces import ArtifactRenderer
from core.models import GeneratedFile
from .base import dedent_block


# (light, dark) oklch values for every shadcn color token
THEME_TOKENS = {
    "background": ("oklch(0.982 0.006 255.51)", "oklch(0.129 0.042 264.695)"),
    "foreground": ("oklch(0.198 0.038 263.85)", "oklch(0.984 0.003 247.858)"),
    "card": ("oklch(1 0 0)", "oklch(0.208 0.042 265.755)"),
    "card-foreground": ("oklch(0.198 0.038 263.85)", "oklch(0.984 0.003 247.858)"),
    "popover": ("oklch(1 0 0)", "oklch(0.208 0.042 265.755)"),
    "popover-foreground": ("oklch(0.198 0.038 263.85)", "oklch(0.984 0.003 247.858)"),
    "primary": ("oklch(0.518 0.178 253.53)", "oklch(0.623 0.214 259.815)"),
    "primary-foreground": ("oklch(0.984 0.003 247.858)", "oklch(0.984 0.003 247.858)"),
    "secondary": ("oklch(0.941 0.011 254.34)", "oklch(0.279 0.041 260.031)"),
    "secondary-foreground": ("oklch(0.198 0.038 263.85)", "oklch(0.984 0.003 247.858)"),
    "muted": ("oklch(0.941 0.011 254.34)", "oklch(0.279 0.041 260.031)"),
    "muted-foreground": ("oklch(0.534 0.046 257.42)", "oklch(0.704 0.04 256.788)"),
    "accent": ("oklch(0.941 0.011 254.34)", "oklch(0.279 0.041 260.031)"),
    "accent-foreground": ("oklch(0.198 0.038 263.85)", "oklch(0.984 0.003 247.858)"),
    "destructive": ("oklch(0.577 0.245 27.325)", "oklch(0.704 0.191 22.216)"),
    "border": ("oklch(0.916 0.015 253.92)", "oklch(1 0 0 / 10%)"),
    "input": ("oklch(0.916 0.015 253.92)", "oklch(1 0 0 / 15%)"),
    "ring": ("oklch(0.518 0.178 253.53)", "oklch(0.551 0.027 264.364)"),
}


class IndexCssRenderer(ArtifactRenderer):
    """Tailwind entry stylesheet with light/dark token sets"""

    @property
    def name(self) -> str:
        return "index_css"

    def render(self, models):
        theme = "\n".join(f"  --color-{token}: var(--{token});" for token in THEME_TOKENS)
        light = "\n".join(f"  --{token}: {values[0]};" for token, values in THEME_TOKENS.items())
        dark = "\n".join(f"  --{token}: {values[1]};" for token, values in THEME_TOKENS.items())
        content = dedent_block(f"""
@import "tailwindcss";

@custom-variant dark (&:is(.dark *));

@theme inline {{
  --radius-sm: calc(var(--radius) - 4px);
  --radius-md: calc(var(--radius) - 2px);
  --radius-lg: var(--radius);
{theme}
}}

:root {{
  --radius: 0.5rem;
{light}
}}

.dark {{
{dark}
}}

@layer base {{
  * {{
    @apply border-border outline-ring/50;
  }}
  body {{
    @apply bg-background text-foreground;
  }}
}}
""")
        return [GeneratedFile(path="src/index.css", content=content)]


class ThemeProviderRenderer(ArtifactRenderer):

    @property
    def name(self) -> str:
        return "theme_provider"

    def render(self, models):
        provider = dedent_block("""
import { createContext, useContext, useEffect, useState } from "react";

type Theme = "dark" | "light" | "system";

type ThemeProviderProps = {
  children: React.ReactNode;
  defaultTheme?: Theme;
  storageKey?: string;
};

type ThemeProviderState = {
  theme: Theme;
  setTheme: (theme: Theme) => void;
};

const ThemeProviderContext = createContext<ThemeProviderState>({
  theme: "system",
  setTheme: () => null,
});

export function ThemeProvider({ children, defaultTheme = "system", storageKey = "vite-ui-theme" }: ThemeProviderProps) {
  const [theme, setTheme] = useState<Theme>(() => (localStorage.getItem(storageKey) as Theme) || defaultTheme);

  useEffect(() => {
    const root = window.document.documentElement;
    root.classList.remove("light", "dark");
    if (theme === "system") {
      const systemTheme = window.matchMedia("(prefers-color-scheme: dark)").matches ? "dark" : "light";
      root.classList.add(systemTheme);
      return;
    }
    root.classList.add(theme);
  }, [theme]);

  const value = {
    theme,
    setTheme: (next: Theme) => {
      localStorage.setItem(storageKey, next);
      setTheme(next);
    },
  };

  return <ThemeProviderContext.Provider value={value}>{children}</ThemeProviderContext.Provider>;
}

export const useTheme = () => useContext(ThemeProviderContext);
""")
        toggle = dedent_block("""
import { Moon, Sun } from "lucide-react";
import { Button } from "@/components/ui/button";
import { useTheme } from "@/components/theme-provider";

export function ThemeToggle() {
  const { theme, setTheme } = useTheme();
  return (
    <Button variant="ghost" size="icon" title="Toggle theme" onClick={() => setTheme(theme === "dark" ? "light" : "dark")}>
      <Sun className="h-5 w-5 rotate-0 scale-100 transition-all dark:-rotate-90 dark:scale-0" />
      <Moon className="absolute h-5 w-5 rotate-90 scale-0 transition-all dark:rotate-0 dark:scale-100" />
    </Button>
  );
}
""")
        return [
            GeneratedFile(path="src/components/theme-provider.tsx", content=provider),
            GeneratedFile(path="src/components/theme-toggle.tsx", content=toggle),
        ]
