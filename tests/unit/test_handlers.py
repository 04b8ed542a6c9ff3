"""Unit tests for the file handlers (cfg, JSON, YAML)."""

from __future__ import annotations

from pathlib import Path

import pytest

from pycfg.cfg import (
    CfgDocument,
    CfgJsonParser,
    CfgParser,
    CfgYamlParser,
    InvalidCfgRecord,
    MalformedAssignment,
    parse,
)

SAMPLE = '# sample\ntop = 1\n[net]\nhost = "example.org # not a comment"\nport = 80\n[net]\nport = 81\n'


@pytest.fixture
def sample_doc() -> CfgDocument:
    return parse(SAMPLE)


def test_cfg_read(tmp_path: Path) -> None:
    f = tmp_path / "app.cfg"
    f.write_text(SAMPLE, encoding="utf-8")
    doc = CfgParser(f, "utf-8").read()
    assert doc.get("net", "host") == "example.org # not a comment"
    assert [s.name for s in doc] == [None, "net", "net"]


def test_cfg_read_guesses_encoding(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    f = tmp_path / "legacy.cfg"
    f.write_bytes('name = "caf\xe9 cr\xe8me"\n'.encode("latin-1"))
    monkeypatch.setattr(
        "pycfg.cfg.parser.chardet.detect",
        lambda raw: {"encoding": "latin-1", "confidence": 0.99},
    )
    doc = CfgParser(f, "utf-8").read()
    assert doc.root.get("name") == "caf\xe9 cr\xe8me"


def test_cfg_read_low_confidence_falls_back_to_gbk(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    f = tmp_path / "gbk.cfg"
    f.write_bytes('name = "名字"\n'.encode("gbk"))
    monkeypatch.setattr(
        "pycfg.cfg.parser.chardet.detect",
        lambda raw: {"encoding": "ascii", "confidence": 0.2},
    )
    with pytest.warns(UserWarning, match="trying gbk"):
        doc = CfgParser(f, "utf-8").read()
    assert doc.root.get("name") == "名字"


def test_cfg_read_malformed(tmp_path: Path) -> None:
    f = tmp_path / "bad.cfg"
    f.write_text("key value\n", encoding="utf-8")
    with pytest.raises(MalformedAssignment):
        CfgParser(f, "utf-8").read()


def test_cfg_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        CfgParser(tmp_path / "nope.cfg").read()


def test_cfg_write_then_read(tmp_path: Path, sample_doc: CfgDocument) -> None:
    f = tmp_path / "out.cfg"
    handler = CfgParser(f, "utf-8")
    handler.write(sample_doc)
    assert handler.read().triples() == sample_doc.triples()


def test_cfg_max_name_len_option(tmp_path: Path) -> None:
    f = tmp_path / "long.cfg"
    f.write_text("abcdef = 1\n", encoding="utf-8")
    doc = CfgParser(f, "utf-8", max_name_len=2).read()
    assert doc.root.keys() == ["ab"]


def test_json_write_then_read(tmp_path: Path, sample_doc: CfgDocument) -> None:
    f = tmp_path / "out.json"
    CfgJsonParser(f).write(sample_doc)
    assert CfgJsonParser(f).read().triples() == sample_doc.triples()


def test_yaml_write_then_read(tmp_path: Path, sample_doc: CfgDocument) -> None:
    f = tmp_path / "out.yaml"
    CfgYamlParser(f).write(sample_doc)
    assert CfgYamlParser(f).read().triples() == sample_doc.triples()


def test_yaml_bare_scalars_become_strings(tmp_path: Path) -> None:
    f = tmp_path / "hand.yaml"
    f.write_text(
        "sections:\n"
        "- name: null\n"
        "  entries: [[a, 1], [b, true]]\n"
        "- name: s\n"
        "  entries: []\n",
        encoding="utf-8",
    )
    doc = CfgYamlParser(f).read()
    assert doc.root.items() == [("a", "1"), ("b", "True")]
    assert doc[1].name == "s"


@pytest.mark.parametrize(
    "payload",
    [
        "[]",
        '{"sections": 1}',
        '{"sections": ["x"]}',
        '{"sections": [{"name": null}, {"name": null}]}',
        '{"sections": [{"name": null, "entries": [["only key"]]}]}',
        "{not json",
    ],
)
def test_json_invalid_payloads(tmp_path: Path, payload: str) -> None:
    f = tmp_path / "bad.json"
    f.write_text(payload, encoding="utf-8")
    with pytest.raises(InvalidCfgRecord):
        CfgJsonParser(f).read()


def test_yaml_invalid_syntax(tmp_path: Path) -> None:
    f = tmp_path / "bad.yaml"
    f.write_text("sections: [unclosed\n", encoding="utf-8")
    with pytest.raises(InvalidCfgRecord):
        CfgYamlParser(f).read()


def test_handler_str(tmp_path: Path) -> None:
    assert str(CfgParser("a.cfg")) == "cfg file: a.cfg (default)"


def test_cfg_negative_name_len_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        CfgParser(tmp_path / "a.cfg", max_name_len=-1)
