import asyncio
from pathlib import Path

from infspark.config import SiteConfig
from infspark.pipeline import package_world
from infspark.web.scaffold import FAVICON_FILENAME, generate_site_structure, resolve_output_root


def test_site_layout_matches_index_links(tmp_path: Path, make_world) -> None:
    root = tmp_path / "site"
    worlds = [make_world(id="abc123"), make_world(id="def456", createdAt=5)]

    report = generate_site_structure(worlds, output_root=root)

    assert (root / "index.html").exists()
    assert (root / FAVICON_FILENAME).exists()
    assert report.index_written is True
    assert sorted(path.parent.name for path in report.pages_written) == ["abc123", "def456"]

    index_html = (root / "index.html").read_text(encoding="utf-8")
    for world in worlds:
        assert f'href="./{world.id}/index.html"' in index_html
        page = (root / world.id / "index.html").read_text(encoding="utf-8")
        assert page == asyncio.run(package_world(world)).index_content


def test_rerun_skips_unchanged_documents(tmp_path: Path, make_world) -> None:
    root = tmp_path / "site"
    worlds = [make_world()]
    generate_site_structure(worlds, output_root=root)

    second = generate_site_structure(worlds, output_root=root)
    forced = generate_site_structure(worlds, output_root=root, force=True)

    assert second.pages_written == []
    assert len(second.pages_unchanged) == 1
    assert second.index_written is False
    assert len(forced.pages_written) == 1
    assert forced.index_written is True


def test_changed_world_is_rewritten(tmp_path: Path, make_world) -> None:
    root = tmp_path / "site"
    generate_site_structure([make_world(title="Before")], output_root=root)

    report = generate_site_structure([make_world(title="After")], output_root=root)

    assert len(report.pages_written) == 1
    assert "After" in (root / "abc123" / "index.html").read_text(encoding="utf-8")


def test_unsafe_ids_are_skipped(tmp_path: Path, make_world) -> None:
    root = tmp_path / "site"

    report = generate_site_structure([make_world(id="../evil"), make_world(id="good")], output_root=root)

    assert report.skipped == ["../evil"]
    assert not (tmp_path / "evil").exists()
    index_html = (root / "index.html").read_text(encoding="utf-8")
    assert "./good/index.html" in index_html
    assert "evil" not in index_html


def test_failed_worlds_are_reported_and_not_linked(tmp_path: Path, make_world) -> None:
    root = tmp_path / "site"
    broken = make_world(id="broken", tools=[{"id": "v", "type": "video-player", "config": {"videoUrl": 42}}])

    report = generate_site_structure([broken, make_world(id="fine")], output_root=root)

    assert list(report.failures) == ["broken"]
    assert not (root / "broken").exists()
    index_html = (root / "index.html").read_text(encoding="utf-8")
    assert "./broken/index.html" not in index_html
    assert "./fine/index.html" in index_html


def test_output_root_resolution(tmp_path: Path) -> None:
    configured = SiteConfig(output_root=tmp_path / "from-config")

    assert resolve_output_root(configured) == (tmp_path / "from-config").resolve()
    assert resolve_output_root(configured, tmp_path / "override") == (tmp_path / "override").resolve()
    assert resolve_output_root(SiteConfig()).name == "site"


def test_summary_rows(tmp_path: Path, make_world) -> None:
    report = generate_site_structure([make_world()], output_root=tmp_path)

    rows = dict(report.summary_rows())

    assert rows["Pages written"] == "1"
    assert rows["Index updated"] == "yes"


def test_duplicate_ids_link_the_surviving_document_once(tmp_path: Path, make_world) -> None:
    root = tmp_path / "site"
    worlds = [make_world(id="dup", title="Alpha Dome"), make_world(id="dup", title="Beta Dome")]

    generate_site_structure(worlds, output_root=root)

    index_html = (root / "index.html").read_text(encoding="utf-8")
    assert index_html.count('href="./dup/index.html"') == 1
    assert "Beta Dome" in index_html
    assert "Alpha Dome" not in index_html
    assert "Beta Dome" in (root / "dup" / "index.html").read_text(encoding="utf-8")
