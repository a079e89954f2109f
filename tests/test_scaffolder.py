import json
import subprocess
from pathlib import Path

import pytest

from core.exceptions import ScaffoldError, StageError
from stages.s4_scaffold import Scaffolder, load_jsonc


class RecordingRunner:
    """Stands in for subprocess; records commands and can fake vite init"""

    def __init__(self, fail_on: str = None):
        self.calls = []
        self.fail_on = fail_on

    def __call__(self, command, cwd):
        self.calls.append((command, Path(cwd)))
        if self.fail_on and self.fail_on in command:
            raise subprocess.CalledProcessError(1, command)
        if "create" in command:
            project = Path(cwd) / command[3]
            project.mkdir()
            (project / "tsconfig.json").write_text(
                '{\n  // generated by vite\n  "files": [],\n  "references": [{"path": "./tsconfig.app.json"},],\n}\n',
                encoding="utf-8",
            )
            (project / "tsconfig.app.json").write_text(
                '{"compilerOptions": {/* strict */ "strict": true, "paths": {"~/*": ["./x/*"]}}}',
                encoding="utf-8",
            )


def test_load_jsonc_strips_comments_and_trailing_commas():
    text = '{\n  // line\n  "url": "http://example.com/*x*/",\n  /* block */ "list": [1, 2,],\n}'

    assert load_jsonc(text) == {"url": "http://example.com/*x*/", "list": [1, 2]}


def test_scaffold_new_project(tmp_path: Path):
    runner = RecordingRunner()
    frontend = tmp_path / "frontend"

    result = Scaffolder(runner=runner).scaffold(frontend)

    assert result.created_project is True
    assert result.steps_run[:3] == ["vite", "dependencies", "tailwind"]
    assert "shadcn" in result.steps_run

    create_cmd, create_cwd = runner.calls[0]
    assert create_cmd[1:3] == ["create", "vite@latest"]
    assert create_cwd == tmp_path.resolve()
    assert all(cwd == frontend.resolve() for _, cwd in runner.calls[1:])
    assert runner.calls[-1][0][1:3] == ["shadcn@latest", "add"]

    app_config = json.loads((frontend / "tsconfig.app.json").read_text(encoding="utf-8"))
    assert app_config["compilerOptions"]["paths"] == {"~/*": ["./x/*"], "@/*": ["./src/*"]}
    assert app_config["compilerOptions"]["strict"] is True
    assert (frontend / "components.json").exists()
    assert "twMerge" in (frontend / "src" / "lib" / "utils.ts").read_text(encoding="utf-8")
    assert "tailwindcss()" in (frontend / "vite.config.ts").read_text(encoding="utf-8")


def test_existing_project_skips_init_and_shadcn(tmp_path: Path):
    frontend = tmp_path / "frontend"
    (frontend / "src" / "components" / "ui").mkdir(parents=True)
    (frontend / "components.json").write_text("{}", encoding="utf-8")
    runner = RecordingRunner()

    result = Scaffolder(runner=runner).scaffold(frontend)

    assert result.created_project is False
    assert {"vite", "shadcn", "components.json", "alias:tsconfig.json"} <= set(result.steps_skipped)
    assert (frontend / "components.json").read_text(encoding="utf-8") == "{}"
    assert [cmd[1] for cmd, _ in runner.calls] == ["install", "install"]
    assert {"@reduxjs/toolkit", "react-redux", "react-hook-form"} <= set(runner.calls[0][0])


def test_failed_command_raises_scaffold_error(tmp_path: Path):
    frontend = tmp_path / "frontend"
    frontend.mkdir()
    runner = RecordingRunner(fail_on="tailwindcss")

    with pytest.raises(ScaffoldError) as exc_info:
        Scaffolder(runner=runner).scaffold(frontend)

    assert exc_info.value.step == "tailwind"


@pytest.mark.asyncio
async def test_execute_reports_stage_error(tmp_path: Path):
    frontend = tmp_path / "frontend"
    frontend.mkdir()
    scaffolder = Scaffolder(runner=RecordingRunner(fail_on="install"))

    with pytest.raises(StageError) as exc_info:
        await scaffolder.execute(str(frontend))

    assert exc_info.value.stage == 4
