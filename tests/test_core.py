import os

import pytest

from scribere.core import tangle, tangle_dir
from scribere.directory import LocalDirectory, MemoryDirectory
from scribere.dispatch import ByAttr, MonoFile
from scribere.errors import BlockIterationError, MissingInitialTarget, ReadError
from scribere.models import SourceCode
from scribere.read import MarkdownReader
from scribere.read_dir import strip_suffix

DOC = (
    "# Notes\n"
    "\n"
    "Some setup first:\n"
    "\n"
    "```python\n"
    "import os\n"
    "```\n"
    "\n"
    "```python file=pkg/util.py\n"
    "def helper():\n"
    "    return 1\n"
    "```\n"
    "\n"
    "```python\n"
    "HELPER = helper()\n"
    "```\n"
)


def test_tangle_text_into_single_file(memdir):
    summary = tangle(DOC, memdir, MonoFile("all.py"))
    assert memdir.dump() == {
        "all.py": b"import os\ndef helper():\n    return 1\nHELPER = helper()\n"
    }
    assert summary.blocks == 3


def test_tangle_by_attribute_with_default(memdir):
    tangle(DOC, memdir, ByAttr("file"), default="pkg/__init__.py")
    assert memdir.dump() == {
        "pkg/__init__.py": b"import os\n",
        "pkg/util.py": b"def helper():\n    return 1\nHELPER = helper()\n",
    }


def test_tangle_by_attribute_without_default_fails(memdir):
    with pytest.raises(MissingInitialTarget):
        tangle(DOC, memdir, ByAttr("file"))
    assert memdir.dump() == {}


def test_tangle_from_path(tmp_path):
    doc = tmp_path / "doc.md"
    doc.write_text(DOC, encoding="utf-8")
    out = LocalDirectory(tmp_path / "out")
    tangle(doc, out, MonoFile("all.py"), reader=MarkdownReader(filter=lambda b: b.get_attr("file") is None))
    assert (tmp_path / "out" / "all.py").read_text() == "import os\nHELPER = helper()\n"


def test_tangle_from_source(memdir):
    tangle(SourceCode.from_code("```\nx\n```\n"), memdir, MonoFile("x"))
    assert memdir.dump() == {"x": b"x\n"}


def test_tangle_rejects_unknown_source(memdir):
    with pytest.raises(TypeError):
        tangle(42, memdir, MonoFile("x"))


def _make_tree(root):
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.py.md").write_text("Intro\n\n```py\nprint('a')\n```\n\n```py\nprint('b')\n```\n")
    (root / "README.md").write_text("Nothing to extract.\n")
    (root / "lib.rs.md").write_text("```rust\nfn f() {}\n```\n")


def test_tangle_dir(tmp_path):
    src, out = tmp_path / "in", tmp_path / "out"
    _make_tree(src)
    summary = tangle_dir(src, out, target=strip_suffix)
    assert (out / "src" / "main.py").read_text() == "print('a')\nprint('b')\n"
    assert (out / "lib.rs").read_text() == "fn f() {}\n"
    assert not (out / "README").exists()
    assert sorted(summary.files) == ["lib.rs", "src/main.py"]


def test_tangle_dir_fresh_rerun_is_stable(tmp_path):
    src, out = tmp_path / "in", tmp_path / "out"
    _make_tree(src)
    tangle_dir(src, out, target=strip_suffix, fresh=True)
    tangle_dir(src, out, target=strip_suffix, fresh=True)
    assert (out / "lib.rs").read_text() == "fn f() {}\n"

    # Without fresh, a rerun appends.
    tangle_dir(src, out, target=strip_suffix)
    assert (out / "lib.rs").read_text() == "fn f() {}\nfn f() {}\n"


def test_tangle_dir_skips_nested_output(tmp_path):
    src = tmp_path / "in"
    _make_tree(src)
    out = src / "build"
    tangle_dir(src, out, target=strip_suffix)
    tangle_dir(src, out, target=strip_suffix, fresh=True)
    assert not (out / "build").exists()
    assert (out / "lib.rs").read_text() == "fn f() {}\n"


def test_tangle_dir_rejects_same_directory(tmp_path):
    with pytest.raises(ValueError):
        tangle_dir(tmp_path, os.fspath(tmp_path))


def test_tangle_file_and_text_give_same_bytes(tmp_path):
    doc = "```\r\nline1\r\nline2\r\n```\r\n"
    p = tmp_path / "crlf.md"
    p.write_bytes(doc.encode("utf-8"))

    from_text, from_file = MemoryDirectory(), MemoryDirectory()
    tangle(doc, from_text, MonoFile("o"))
    tangle(SourceCode.from_file(p), from_file, MonoFile("o"))
    assert from_file.dump() == from_text.dump() == {"o": b"line1\r\nline2\r\n"}


def test_tangle_dir_reports_failing_source(tmp_path):
    src, out = tmp_path / "in", tmp_path / "out"
    src.mkdir()
    (src / "bad.md").write_bytes(b"```\n\xff\xfe\n```\n")
    with pytest.raises(BlockIterationError) as exc:
        tangle_dir(src, out, target=lambda name: name + ".out")
    assert exc.value.stage == "sources"
    assert isinstance(exc.value.__cause__, ReadError)
