"""Stage 4: Scaffold the Vite + Tailwind + shadcn project."""

import json
import re
import subprocess
from pathlib import Path
from typing import Callable, Optional, Union

import structlog

from config import settings
from core.exceptions import ScaffoldError, StageError
from core.interfaces import Stage
from core.models import ScaffoldResult

logger = structlog.get_logger(__name__)

CommandRunner = Callable[[list[str], Path], None]

RUNTIME_PACKAGES = [
    "axios", "react-router-dom", "lucide-react", "class-variance-authority",
    "react-hook-form", "zod", "@hookform/resolvers", "clsx", "tailwind-merge",
    "@tanstack/react-table", "date-fns", "i18next", "react-i18next",
    "i18next-browser-languagedetector", "@reduxjs/toolkit", "react-redux",
]

TAILWIND_PACKAGES = ["tailwindcss", "@tailwindcss/vite", "tailwindcss-animate", "@types/node"]

SHADCN_COMPONENTS = [
    "button", "input", "label", "select", "textarea", "checkbox", "radio-group",
    "form", "table", "dropdown-menu", "dialog", "alert-dialog", "collapsible",
    "popover", "calendar", "switch", "card", "badge", "separator",
]

TSCONFIG_FILES = ["tsconfig.json", "tsconfig.app.json"]

VITE_CONFIG = """import path from "path";
import react from "@vitejs/plugin-react";
import { defineConfig } from "vite";
import tailwindcss from "@tailwindcss/vite";

export default defineConfig({
  plugins: [react(), tailwindcss()],
  resolve: {
    alias: {
      "@": path.resolve(__dirname, "./src"),
    },
  },
});
"""

COMPONENTS_JSON = {
    "$schema": "https://ui.shadcn.com/schema.json",
    "style": "default",
    "rsc": False,
    "tsx": True,
    "tailwind": {
        "config": "",
        "css": "src/index.css",
        "baseColor": "slate",
        "cssVariables": True,
        "prefix": "",
    },
    "aliases": {
        "components": "@/components",
        "utils": "@/lib/utils",
        "ui": "@/components/ui",
        "lib": "@/lib",
        "hooks": "@/hooks",
    },
    "iconLibrary": "lucide",
}

UTILS_TS = """import { type ClassValue, clsx } from "clsx"
import { twMerge } from "tailwind-merge"

export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx(inputs))
}
"""

# strings are kept; comments and trailing commas are dropped
_JSONC_NOISE = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/|,(?=\s*[}\]])', re.DOTALL)


def load_jsonc(text: str) -> dict:
    """Parse JSON that may carry comments and trailing commas (tsconfig style)"""
    cleaned = _JSONC_NOISE.sub(lambda m: m.group(1) or "", text)
    return json.loads(cleaned) if cleaned.strip() else {}


def run_command(command: list[str], cwd: Path) -> None:
    subprocess.run(command, cwd=cwd, check=True)


class Scaffolder(Stage[str, ScaffoldResult]):
    """Create and configure the frontend project the generated files live in."""

    def __init__(self, runner: Optional[CommandRunner] = None):
        self.runner = runner or run_command

    @property
    def name(self) -> str:
        return "Scaffolding"

    @property
    def stage_number(self) -> int:
        return 4

    def validate_input(self, input_data: Union[str, Path]) -> bool:
        return isinstance(input_data, (str, Path)) and bool(str(input_data))

    async def execute(self, input_data: Union[str, Path]) -> ScaffoldResult:
        try:
            return self.scaffold(Path(input_data))
        except ScaffoldError as exc:
            raise StageError(self.stage_number, str(exc)) from exc

    def scaffold(self, frontend_dir: Path) -> ScaffoldResult:
        frontend_dir = frontend_dir.resolve()
        result = ScaffoldResult(project_path=str(frontend_dir))
        logger.info("Scaffolding frontend project", path=str(frontend_dir))

        if frontend_dir.exists():
            logger.info("Frontend folder already exists, skipping Vite init")
            result.steps_skipped.append("vite")
        else:
            frontend_dir.parent.mkdir(parents=True, exist_ok=True)
            self._run("vite", [
                settings.NPM_COMMAND, "create", "vite@latest", frontend_dir.name,
                "--", "--template", "react-ts",
            ], frontend_dir.parent)
            result.created_project = True
            result.steps_run.append("vite")

        self._run("dependencies", [settings.NPM_COMMAND, "install", *RUNTIME_PACKAGES], frontend_dir)
        result.steps_run.append("dependencies")
        self._run("tailwind", [settings.NPM_COMMAND, "install", *TAILWIND_PACKAGES], frontend_dir)
        result.steps_run.append("tailwind")

        for tsconfig in TSCONFIG_FILES:
            if self.patch_tsconfig(frontend_dir / tsconfig):
                result.steps_run.append(f"alias:{tsconfig}")
            else:
                result.steps_skipped.append(f"alias:{tsconfig}")

        self._write_config_files(frontend_dir, result)

        if (frontend_dir / "src" / "components" / "ui").exists():
            logger.info("shadcn components already exist, skipping")
            result.steps_skipped.append("shadcn")
        else:
            self._run("shadcn", [
                settings.NPX_COMMAND, "shadcn@latest", "add", *SHADCN_COMPONENTS, "--yes",
            ], frontend_dir)
            result.steps_run.append("shadcn")

        logger.info("Scaffold complete", steps_run=len(result.steps_run), steps_skipped=len(result.steps_skipped))
        return result

    def patch_tsconfig(self, path: Path) -> bool:
        """Add baseUrl and the @/* alias; False when the file is missing"""
        if not path.exists():
            logger.warning("tsconfig not found, skipping alias setup", file=path.name)
            return False
        try:
            tsconfig = load_jsonc(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ScaffoldError(f"alias:{path.name}", str(exc)) from exc

        options = tsconfig.setdefault("compilerOptions", {})
        options["baseUrl"] = "."
        options["paths"] = {**options.get("paths", {}), "@/*": ["./src/*"]}
        path.write_text(json.dumps(tsconfig, indent=2) + "\n", encoding="utf-8")
        logger.info("Added baseUrl and @/* path alias", file=path.name)
        return True

    def _write_config_files(self, frontend_dir: Path, result: ScaffoldResult) -> None:
        # always rewritten so the @ alias resolves
        (frontend_dir / "vite.config.ts").write_text(VITE_CONFIG, encoding="utf-8")
        result.steps_run.append("vite.config.ts")

        components_json = frontend_dir / "components.json"
        if components_json.exists():
            result.steps_skipped.append("components.json")
        else:
            components_json.write_text(json.dumps(COMPONENTS_JSON, indent=2) + "\n", encoding="utf-8")
            result.steps_run.append("components.json")

        utils_ts = frontend_dir / "src" / "lib" / "utils.ts"
        if utils_ts.exists():
            result.steps_skipped.append("utils.ts")
        else:
            utils_ts.parent.mkdir(parents=True, exist_ok=True)
            utils_ts.write_text(UTILS_TS, encoding="utf-8")
            result.steps_run.append("utils.ts")

    def _run(self, step: str, command: list[str], cwd: Path) -> None:
        logger.info("Running step", step=step, command=" ".join(command))
        try:
            self.runner(command, cwd)
        except subprocess.CalledProcessError as exc:
            logger.error("Step failed", step=step, returncode=exc.returncode)
            raise ScaffoldError(step, f"exit code {exc.returncode}") from exc
        except OSError as exc:
            raise ScaffoldError(step, str(exc)) from exc
