from pathlib import Path

import pytest

from adocsmith.adapters.asciidoc import AsciiDocConverter
from adocsmith.api.pipeline import (
    ConversionBundle,
    convert_documents,
    discover_sources,
    write_snippet_definitions,
)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "Content"
    (root / "Topics").mkdir(parents=True)
    (root / "Snippets").mkdir()
    (root / "Topics" / "Intro.htm").write_text(
        "<html><body><h1>Intro</h1>\n"
        '<p>Call <MadCap:snippetText src="../Snippets/Phone.flsnp" /></p></body></html>',
        encoding="utf-8",
    )
    (root / "Topics" / "Setup.HTML").write_text(
        '<h2>Setup</h2>\n<p>See <MadCap:xref href="Intro.htm">Intro</MadCap:xref></p>',
        encoding="utf-8",
    )
    (root / "Snippets" / "Phone.flsnp").write_text("<p>555-0100</p>", encoding="utf-8")
    (root / "notes.txt").write_text("not a topic", encoding="utf-8")
    return root


def test_discover_sources_filters_suffixes(project: Path) -> None:
    sources = discover_sources([project], [".htm", ".html"])
    assert [path.name for path in sources] == ["Intro.htm", "Setup.HTML"]


def test_discover_sources_keeps_explicit_files(project: Path) -> None:
    notes = project / "notes.txt"
    assert discover_sources([notes, notes], [".htm"]) == [notes]


def test_convert_documents_in_memory(project: Path, emitter) -> None:
    sources = discover_sources([project], [".htm", ".html"])
    bundle = convert_documents(sources, converter=AsciiDocConverter(), emitter=emitter)

    assert bundle.ok
    assert [fragment.text for fragment in bundle.fragments] == [
        "== Intro\n\nCall {Phone}\n",
        "=== Setup\n\nSee xref:Intro.adoc[Intro]\n",
    ]
    assert all(fragment.output_path is None for fragment in bundle.fragments)
    assert [name for name, _ in emitter.events] == ["document_converted", "document_converted"]


def test_convert_documents_mirrors_tree(project: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "build"
    converter = AsciiDocConverter()
    sources = discover_sources([project], converter.config.source_suffixes)

    bundle = convert_documents(
        sources, converter=converter, output_dir=output_dir, source_root=project
    )

    intro = output_dir / "Topics" / "Intro.adoc"
    assert intro.read_text(encoding="utf-8") == "== Intro\n\nCall {Phone}\n"
    assert (output_dir / "Topics" / "Setup.adoc").exists()
    assert bundle.fragments[0].output_path == intro


def test_failed_document_does_not_stop_the_run(project: Path, tmp_path: Path, emitter) -> None:
    broken = tmp_path / "broken.htm"
    broken.write_bytes(b"\xff\xfe<p>\x00bad")
    sources = [broken, project / "Topics" / "Intro.htm"]

    bundle = convert_documents(sources, converter=AsciiDocConverter(), emitter=emitter)

    assert not bundle.ok
    assert [failure.source for failure in bundle.failures] == [broken]
    assert [fragment.source.name for fragment in bundle.fragments] == ["Intro.htm"]
    assert emitter.errors[0][0] == "broken.htm"


def test_output_collision_is_a_failure(tmp_path: Path, emitter) -> None:
    for folder in ("a", "b"):
        (tmp_path / folder).mkdir()
        (tmp_path / folder / "intro.htm").write_text(f"<p>{folder}</p>", encoding="utf-8")
    sources = [tmp_path / "a" / "intro.htm", tmp_path / "b" / "intro.htm"]
    output_dir = tmp_path / "build"

    bundle = convert_documents(
        sources, converter=AsciiDocConverter(), output_dir=output_dir, emitter=emitter
    )

    assert not bundle.ok
    assert [failure.source for failure in bundle.failures] == [sources[1]]
    assert (output_dir / "intro.adoc").read_text(encoding="utf-8") == "a\n"
    document, message = emitter.errors[0]
    assert document == "intro.htm"
    assert "already written for" in message


def test_combined_output() -> None:
    bundle = ConversionBundle()
    assert bundle.combined_output() == ""
    assert bundle.ok


def test_write_snippet_definitions(project: Path, tmp_path: Path, emitter) -> None:
    converter = AsciiDocConverter()
    convert_documents([project / "Topics" / "Intro.htm"], converter=converter)

    target = tmp_path / "build" / "snippets.adoc"
    definitions = write_snippet_definitions(converter, target, emitter=emitter)

    assert definitions == ":Phone: pass:q[555-0100]\n"
    assert target.read_text(encoding="utf-8") == definitions
    assert emitter.events == [("snippets_written", {"count": 1, "target": str(target)})]


def test_no_snippets_writes_nothing(tmp_path: Path) -> None:
    target = tmp_path / "snippets.adoc"
    assert write_snippet_definitions(AsciiDocConverter(), target) == ""
    assert not target.exists()
