import logging
import zipfile
from pathlib import Path

from doclinks.modules.javadoc.archive import OfflineIndexExtractor
from doclinks.modules.javadoc.domain import ResolvedArtifact, coordinate_from_parts
from doclinks.modules.javadoc.output import link_option, linkoffline_option, quote_option, write_options
from doclinks.modules.javadoc.service import OfflineLink, OptionsAssembler, ResolvedOfflineMap


def make_jar(path: Path, entries: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return path


def offline_entry(tmp_path: Path, artifact_id: str, url: str, entries: dict) -> OfflineLink:
    coords = coordinate_from_parts("com.example", artifact_id, "1.0", classifier="javadoc")
    jar = make_jar(tmp_path / "repo" / f"{artifact_id}-1.0-javadoc.jar", entries)
    return OfflineLink(ResolvedArtifact(coords, jar), url)


def test_element_list_is_duplicated_as_package_list(tmp_path):
    jar = make_jar(tmp_path / "a.jar", {"element-list": "com.example.a\n", "index.html": "<html/>"})
    location = tmp_path / "out" / "com.example:a"

    written = OfflineIndexExtractor().extract(jar, location)

    assert {p.name for p in written} == {"element-list", "package-list"}
    assert (location / "package-list").read_text() == (location / "element-list").read_text()
    assert not (location / "index.html").exists()


def test_package_list_is_duplicated_as_element_list(tmp_path):
    jar = make_jar(tmp_path / "a.jar", {"package-list": "com.example.a\n"})
    location = tmp_path / "out"

    OfflineIndexExtractor().extract(jar, location)

    assert (location / "element-list").read_text() == "com.example.a\n"


def test_archive_without_index_extracts_nothing(tmp_path):
    jar = make_jar(tmp_path / "a.jar", {"index.html": "<html/>"})

    assert OfflineIndexExtractor().extract(jar, tmp_path / "out") == []


def test_offline_url_supersedes_plain_link(tmp_path):
    entry = offline_entry(tmp_path, "lib-a", "https://docs/lib-a/", {"element-list": "com.example.a\n"})
    offline = ResolvedOfflineMap({"com.example:lib-a": entry})
    links = ["https://docs/lib-a/", "https://other/", "https://other/"]

    lines = OptionsAssembler().assemble(links, offline, tmp_path / "out")

    location = tmp_path / "out" / "com.example:lib-a"
    assert lines == [
        "-link https://other/",
        f"-linkoffline https://docs/lib-a/ {location}",
    ]
    assert (location / "package-list").exists()


def test_artifact_without_index_is_skipped_with_warning(tmp_path, caplog):
    good = offline_entry(tmp_path, "good", "https://docs/good/", {"package-list": "p\n"})
    empty = offline_entry(tmp_path, "empty", "https://docs/empty/", {"README": "x"})
    offline = ResolvedOfflineMap({"com.example:good": good, "com.example:empty": empty})

    with caplog.at_level(logging.WARNING):
        lines = OptionsAssembler().assemble([], offline, tmp_path / "out")

    assert len(lines) == 1
    assert lines[0].startswith("-linkoffline https://docs/good/ ")
    assert any("No location files" in r.getMessage() for r in caplog.records)


def test_artifacts_sharing_a_url_each_get_a_directive(tmp_path):
    a = offline_entry(tmp_path, "a", "https://docs/shared/", {"element-list": "a\n"})
    b = offline_entry(tmp_path, "b", "https://docs/shared/", {"element-list": "b\n"})
    offline = ResolvedOfflineMap({"com.example:b": b, "com.example:a": a})

    lines = OptionsAssembler().assemble([], offline, tmp_path / "out")

    assert lines == [
        f"-linkoffline https://docs/shared/ {tmp_path / 'out' / 'com.example:a'}",
        f"-linkoffline https://docs/shared/ {tmp_path / 'out' / 'com.example:b'}",
    ]


def test_option_quoting():
    assert quote_option("https://docs/") == "https://docs/"
    assert quote_option("/tmp/with space") == '"/tmp/with space"'
    assert link_option("https://docs/") == "-link https://docs/"
    assert linkoffline_option("https://d/", Path("/a b")) == '-linkoffline https://d/ "/a b"'


def test_write_options(tmp_path):
    path = write_options(tmp_path / "nested" / "options", ["-link https://a/", "-link https://b/"])

    assert path.read_text(encoding="utf-8") == "-link https://a/\n-link https://b/\n"
