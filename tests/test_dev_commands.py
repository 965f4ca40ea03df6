"""Tests for developer ergonomics: standard commands and project files."""

from posts_service.app.core.settings import _PROJECT_ROOT


class TestMakefileTargets:
    def test_makefile_has_required_targets(self) -> None:
        content = (_PROJECT_ROOT / "Makefile").read_text()
        for target in [
            "install", "run-api", "test", "lint", "format",
            "check", "migrate", "migrate-check",
        ]:
            assert f"{target}:" in content, f"Missing Makefile target: {target}"

    def test_makefile_install_uses_dev(self) -> None:
        content = (_PROJECT_ROOT / "Makefile").read_text()
        assert ".[dev]" in content

    def test_makefile_run_api_uses_uvicorn(self) -> None:
        content = (_PROJECT_ROOT / "Makefile").read_text()
        assert "uvicorn posts_service.app.main:app" in content

    def test_makefile_check_combines_lint_test_migrate(self) -> None:
        content = (_PROJECT_ROOT / "Makefile").read_text()
        assert "check: lint test migrate-check" in content


class TestReadmeDocumentation:
    def test_readme_documents_all_commands(self) -> None:
        content = (_PROJECT_ROOT / "README.md").read_text()
        assert "Quick Start" in content
        for cmd in [
            "make install", "make run-api", "make test", "make lint",
            "make format", "make check", "make migrate", "make migrate-check",
        ]:
            assert cmd in content, f"README missing command: {cmd}"

    def test_readme_documents_configuration(self) -> None:
        content = (_PROJECT_ROOT / "README.md").read_text()
        for var in ["CORS_ALLOWED_ORIGIN", "DATABASE_URL", "APP_DB_PATH", "DEFAULT_LOCALE"]:
            assert var in content


class TestProjectStructure:
    def test_key_files_exist(self) -> None:
        for rel_path in [
            "posts_service/app/main.py",
            "posts_service/app/core/settings.py",
            "posts_service/app/core/logging.py",
            "posts_service/app/db/engine.py",
            "posts_service/app/db/migrations.py",
            "alembic.ini",
            "pyproject.toml",
            "Makefile",
            "README.md",
            ".env.example",
        ]:
            assert (_PROJECT_ROOT / rel_path).exists(), f"Missing: {rel_path}"

    def test_alembic_versions_exist(self) -> None:
        versions = _PROJECT_ROOT / "alembic" / "versions"
        assert len(list(versions.glob("*.py"))) >= 1
