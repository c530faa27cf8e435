import os

from infspark.config import SiteConfig, apply_overrides, settings


def test_project_dotenv_overrides_environment(tmp_path, monkeypatch) -> None:
    project_dir = tmp_path / "project"
    project_env = project_dir / ".env"

    project_dir.mkdir()
    project_env.write_text("INFSPARK_PUBLIC_ROOT=https://project.test/worlds/\n", encoding="utf-8")

    monkeypatch.chdir(project_dir)
    monkeypatch.setenv("INFSPARK_PUBLIC_ROOT", "https://env.test")

    settings._load_dotenv()

    assert os.getenv("INFSPARK_PUBLIC_ROOT") == "https://project.test/worlds/"
    assert apply_overrides().public_root == "https://project.test/worlds"


def test_overrides_replace_configured_values(monkeypatch) -> None:
    monkeypatch.setenv("INFSPARK_REPO_NAME", "env-repo")
    monkeypatch.delenv("INFSPARK_PUBLIC_ROOT", raising=False)

    site = apply_overrides(SiteConfig(site_name="Configured", repo_name="file-repo"))

    assert site.repo_name == "env-repo"
    assert site.site_name == "Configured"


def test_no_overrides_returns_site_unchanged(monkeypatch) -> None:
    monkeypatch.delenv("INFSPARK_PUBLIC_ROOT", raising=False)
    monkeypatch.delenv("INFSPARK_REPO_NAME", raising=False)
    site = SiteConfig(site_name="Configured")

    assert apply_overrides(site) is site
