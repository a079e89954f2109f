"""Shell renderers: sidebar, header, dashboard layout and dashboard page"""

import json

from core.interfaces import ArtifactRenderer
from core.models import GeneratedFile
from utils.naming import pascal_case, plural_route_segment, route_segment
from .base import dedent_block, js, model_key


class SidebarRenderer(ArtifactRenderer):
    """Collapsible navigation with one entry per model"""

    def __init__(self, app_title: str = "Admin Panel"):
        self.app_title = app_title

    @property
    def name(self) -> str:
        return "sidebar"

    def nav_items(self, models) -> list[dict]:
        items = [{"label": "Dashboard", "labelKey": "sidebar.dashboard", "href": "/", "icon": "Home"}]
        for model in models.values():
            pascal = pascal_case(model.name)
            children = [{
                "label": f"All {pascal}s",
                "labelKey": "sidebar.all",
                "href": f"/{plural_route_segment(model.name)}",
            }]
            if not model.is_popup:
                children.append({
                    "label": f"Create {pascal}",
                    "labelKey": "sidebar.create",
                    "href": f"/{route_segment(model.name)}/create",
                })
            items.append({
                "label": model.name,
                "labelKey": f"{model_key(model)}.label",
                "icon": "Users",
                "children": children,
            })
        return items

    def render(self, models):
        nav_items = json.dumps(self.nav_items(models), indent=2, ensure_ascii=False)
        content = dedent_block(f"""
import React from "react";
import {{ Link, useLocation }} from "react-router-dom";
import {{ useTranslation }} from "react-i18next";
import {{ cn }} from "@/lib/utils";
import {{ Home, Users, ChevronDown, ChevronLeft, ChevronRight, Circle, X }} from "lucide-react";
import {{ Button }} from "@/components/ui/button";
import {{ Collapsible, CollapsibleContent, CollapsibleTrigger }} from "@/components/ui/collapsible";

type NavItem = {{ label: string; labelKey: string; href?: string; icon?: string; children?: NavItem[] }};

const iconMap: {{ [key: string]: React.ElementType }} = {{ Home, Users }};
const navItems: NavItem[] = {nav_items};

const isLinkActive = (item: NavItem, pathname: string): boolean => {{
  if (item.href === pathname) return true;
  return item.children?.some((child) => isLinkActive(child, pathname)) ?? false;
}};

function NavMenu({{ items, pathname, isOpen }}: {{ items: NavItem[]; pathname: string; isOpen: boolean }}) {{
  const {{ t }} = useTranslation();
  return (
    <div className="space-y-1">
      {{items.map((item) => {{
        const Icon = iconMap[item.icon ?? "Users"];
        const isActive = isLinkActive(item, pathname);
        const label = t(item.labelKey, item.label);

        if (!isOpen) {{
          return (
            <Link key={{item.label}} to={{item.children ? item.children[0].href! : item.href!}} title={{label}}
              className={{cn("flex items-center justify-center p-3 rounded-md text-gray-400 hover:text-white hover:bg-gray-800", isActive && "bg-gray-700 text-white")}}>
              <Icon size={{22}} />
            </Link>
          );
        }}

        return item.children ? (
          <Collapsible key={{item.label}} className="w-full" defaultOpen={{isActive}}>
            <CollapsibleTrigger className={{cn("flex items-center justify-between w-full p-3 rounded-md text-gray-400 hover:text-white hover:bg-gray-800", isActive && "text-white")}}>
              <div className="flex items-center gap-4">
                <Icon size={{20}} />
                <span className="font-semibold">{{label}}</span>
              </div>
              <ChevronDown className="h-4 w-4" />
            </CollapsibleTrigger>
            <CollapsibleContent className="pl-10 py-1 space-y-1">
              {{item.children.map((child) => (
                <Link key={{child.href}} to={{child.href!}}
                  className={{cn("flex items-center gap-3 p-2 rounded-md text-gray-400 hover:text-white hover:bg-gray-800", pathname === child.href && "text-white font-semibold")}}>
                  <Circle className="h-2 w-2 fill-current" />
                  <span>{{t(child.labelKey, {{ defaultValue: child.label, model: label }})}}</span>
                </Link>
              ))}}
            </CollapsibleContent>
          </Collapsible>
        ) : (
          <Link key={{item.href}} to={{item.href!}}
            className={{cn("flex items-center gap-4 p-3 rounded-md text-gray-400 hover:text-white hover:bg-gray-800", isActive && "bg-gray-700 text-white")}}>
            <Icon size={{20}} />
            <span className="font-semibold">{{label}}</span>
          </Link>
        );
      }})}}
    </div>
  );
}}

interface SidebarProps {{
  isOpen: boolean;
  setIsOpen: (isOpen: boolean) => void;
  isMobile: boolean;
}}

export default function Sidebar({{ isOpen, setIsOpen, isMobile }}: SidebarProps) {{
  const location = useLocation();
  const onToggle = () => setIsOpen(!isOpen);

  if (isMobile) {{
    return (
      <aside className={{cn("fixed top-0 left-0 h-full w-72 bg-gray-900 text-white z-40 flex flex-col transition-transform", isOpen ? "translate-x-0" : "-translate-x-full")}}>
        <div className="p-4 border-b border-gray-800 flex items-center justify-between">
          <span className="font-bold text-lg">{{{js(self.app_title)}}}</span>
          <Button variant="ghost" size="icon" onClick={{onToggle}} className="text-white hover:bg-gray-700">
            <X size={{18}} />
          </Button>
        </div>
        <nav className="flex-1 p-4 overflow-y-auto">
          <NavMenu items={{navItems}} pathname={{location.pathname}} isOpen={{true}} />
        </nav>
      </aside>
    );
  }}

  return (
    <aside className={{cn("hidden md:flex md:flex-col bg-gray-900 text-white transition-all", isOpen ? "w-72" : "w-20")}}>
      <div className={{cn("p-4 border-b border-gray-800 flex items-center", isOpen ? "justify-between" : "justify-center")}}>
        {{isOpen && <span className="font-bold text-lg ml-2">{{{js(self.app_title)}}}</span>}}
        <Button variant="ghost" size="icon" onClick={{onToggle}} className="text-white hover:bg-gray-700">
          {{isOpen ? <ChevronLeft size={{18}} /> : <ChevronRight size={{18}} />}}
        </Button>
      </div>
      <nav className="flex-1 p-2 overflow-y-auto">
        <NavMenu items={{navItems}} pathname={{location.pathname}} isOpen={{isOpen}} />
      </nav>
    </aside>
  );
}}
""")
        return [GeneratedFile(path="src/components/layout/Sidebar.tsx", content=content)]


class HeaderRenderer(ArtifactRenderer):

    @property
    def name(self) -> str:
        return "header"

    def render(self, models):
        content = dedent_block("""
import { useLocation } from "react-router-dom";
import { Menu, LogOut } from "lucide-react";
import { Button } from "@/components/ui/button";
import { ThemeToggle } from "@/components/theme-toggle";
import { LanguageSwitcher } from "@/components/language-switcher";
import { useAuth } from "@/context/AuthContext";

function formatPathname(pathname: string): string {
  if (pathname === "/") return "Dashboard";
  return pathname
    .split("/")
    .filter(Boolean)
    .filter((part) => !/^\\d+$/.test(part))
    .map((word) => word.charAt(0).toUpperCase() + word.slice(1))
    .join(" ");
}

interface HeaderProps {
  onMenuClick: () => void;
}

export default function Header({ onMenuClick }: HeaderProps) {
  const location = useLocation();
  const { logout } = useAuth();

  return (
    <header className="flex items-center justify-between p-4 border-b bg-card">
      <div className="flex items-center gap-4">
        <Button variant="ghost" size="icon" className="md:hidden" onClick={onMenuClick}>
          <Menu />
        </Button>
        <h1 className="text-xl font-semibold">{formatPathname(location.pathname)}</h1>
      </div>
      <div className="flex items-center gap-2">
        <LanguageSwitcher />
        <ThemeToggle />
        <Button variant="ghost" size="icon" title="Logout" onClick={logout}>
          <LogOut className="h-5 w-5" />
        </Button>
      </div>
    </header>
  );
}
""")
        return [GeneratedFile(path="src/components/layout/Header.tsx", content=content)]


class DashboardLayoutRenderer(ArtifactRenderer):

    @property
    def name(self) -> str:
        return "dashboard_layout"

    def render(self, models):
        content = dedent_block("""
import { useEffect, useState } from "react";
import { Outlet } from "react-router-dom";
import Sidebar from "@/components/layout/Sidebar";
import Header from "@/components/layout/Header";

const MOBILE_BREAKPOINT = 768;

export default function DashboardLayout() {
  const [isMobile, setIsMobile] = useState(window.innerWidth < MOBILE_BREAKPOINT);
  const [isOpen, setIsOpen] = useState(!isMobile);

  useEffect(() => {
    const onResize = () => {
      const mobile = window.innerWidth < MOBILE_BREAKPOINT;
      setIsMobile(mobile);
      setIsOpen(!mobile);
    };
    window.addEventListener("resize", onResize);
    return () => window.removeEventListener("resize", onResize);
  }, []);

  return (
    <div className="flex h-screen bg-background text-foreground">
      <Sidebar isOpen={isOpen} setIsOpen={setIsOpen} isMobile={isMobile} />
      {isMobile && isOpen && (
        <div className="fixed inset-0 bg-black/50 z-30" onClick={() => setIsOpen(false)} />
      )}
      <div className="flex flex-1 flex-col overflow-hidden">
        <Header onMenuClick={() => setIsOpen(!isOpen)} />
        <main className="flex-1 overflow-y-auto p-4 md:p-6">
          <Outlet />
        </main>
      </div>
    </div>
  );
}
""")
        return [GeneratedFile(path="src/layout/DashboardLayout.tsx", content=content)]


class DashboardRenderer(ArtifactRenderer):
    """Landing page with one card per model"""

    @property
    def name(self) -> str:
        return "dashboard"

    def render(self, models):
        cards = json.dumps(
            [
                {
                    "label": model.name,
                    "labelKey": f"{model_key(model)}.label",
                    "href": f"/{plural_route_segment(model.name)}",
                    "fieldCount": len(model.form_fields()),
                }
                for model in models.values()
            ],
            indent=2,
            ensure_ascii=False,
        )
        content = dedent_block(f"""
import {{ Link }} from "react-router-dom";
import {{ useTranslation }} from "react-i18next";
import {{ Card, CardContent, CardHeader, CardTitle }} from "@/components/ui/card";

const modelCards = {cards};

export default function Dashboard() {{
  const {{ t }} = useTranslation();
  return (
    <div className="space-y-6">
      <h1 className="text-2xl font-bold">{{t("common.dashboard", "Dashboard")}}</h1>
      <div className="grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-3 gap-6">
        {{modelCards.map((card) => (
          <Link key={{card.href}} to={{card.href}}>
            <Card className="hover:shadow-md transition-shadow">
              <CardHeader>
                <CardTitle>{{t(card.labelKey, card.label)}}</CardTitle>
              </CardHeader>
              <CardContent className="text-sm text-muted-foreground">
                {{t("common.fieldCount", {{ count: card.fieldCount, defaultValue: "{{{{count}}}} fields" }})}}
              </CardContent>
            </Card>
          </Link>
        ))}}
      </div>
    </div>
  );
}}
""")
        return [GeneratedFile(path="src/pages/Dashboard.tsx", content=content)]
