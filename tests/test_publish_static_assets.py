import logging
from io import StringIO

from django.core.management import call_command


def _run(source, publish_dir):
    out = StringIO()
    call_command("publish_static_assets", source=str(source), publish_dir=str(publish_dir), stdout=out)
    return out.getvalue()


def test_copies_present_files_unmodified(tmp_path):
    source = tmp_path / "project"
    source.mkdir()
    (source / "robots.txt").write_text("User-agent: *\n")
    (source / "sitemap.xml").write_bytes(b"<urlset/>")
    (source / "_redirects").write_text("/*  /index.html  200\n")
    (source / "netlify.toml").write_text('[build]\npublish = "dist/public"\n')
    publish_dir = tmp_path / "dist" / "public"

    output = _run(source, publish_dir)

    assert (publish_dir / "robots.txt").read_text() == "User-agent: *\n"
    assert (publish_dir / "sitemap.xml").read_bytes() == b"<urlset/>"
    assert (publish_dir / "_redirects").read_text() == "/*  /index.html  200\n"
    assert (tmp_path / "dist" / "netlify.toml").read_text() == '[build]\npublish = "dist/public"\n'
    assert "Published 4 static file(s)" in output


def test_missing_files_are_skipped(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="calculators")
    source = tmp_path / "project"
    source.mkdir()
    (source / "robots.txt").write_text("User-agent: *\n")
    publish_dir = tmp_path / "out"

    output = _run(source, publish_dir)

    assert (publish_dir / "robots.txt").exists()
    assert not (publish_dir / "sitemap.xml").exists()
    assert not (tmp_path / "netlify.toml").exists()
    skipped = [record.getMessage() for record in caplog.records if "not found" in record.getMessage()]
    assert skipped == [
        "sitemap.xml not found, skipping",
        "_redirects not found, skipping",
        "netlify.toml not found, skipping",
    ]
    assert all(record.levelno == logging.INFO for record in caplog.records if record.name.startswith("calculators"))
    assert "not found" not in output
    assert "Published 1 static file(s)" in output
