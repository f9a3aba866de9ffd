# -*- coding: utf-8 -*-
"""Core 模块单元测试：文档结构、读文件、配置。"""

from __future__ import annotations

from pathlib import Path

from novel2epub.core.config import load_config
from novel2epub.core.io import book_paths, read_lines
from novel2epub.core.schemas.novel import Chapter, Novel


class TestNovel:
	def test_stable_sort_by_id(self):
		n = Novel()
		for cid, title in [(3, "c"), (1, "a"), (-1, "x1"), (2, "b"), (-1, "x2"), (1, "a2")]:
			n.add_chapter(cid, title)
		n.sort_chapters()
		assert [(c.id, c.title) for c in n.chapters] == [
			(-1, "x1"), (-1, "x2"), (1, "a"), (1, "a2"), (2, "b"), (3, "c"),
		]

	def test_heading(self):
		assert Chapter(id=5, title="Five").heading == "5 Five"
		assert Chapter(id=-1, title="番外：S").heading == "番外：S"

	def test_append_line_without_chapter(self):
		n = Novel()
		assert n.append_line("x") is False
		n.add_chapter(1, "A")
		assert n.append_line("x") is True
		assert n.chapters[0].lines == ["x"]


class TestIO:
	def test_read_lines_strips_bom_and_newlines(self, tmp_path: Path):
		p = tmp_path / "book.txt"
		p.write_bytes("\ufeff《T》\r\n第1章 A\r\n　a\n".encode("utf-8"))
		assert read_lines(p) == ["《T》", "第1章 A", "　a"]

	def test_read_lines_gb18030(self, tmp_path: Path):
		p = tmp_path / "book.txt"
		p.write_bytes("第一章 开始\n".encode("gb18030"))
		assert read_lines(p, encoding="gb18030") == ["第一章 开始"]

	def test_read_lines_keeps_form_feed_and_line_separator(self, tmp_path: Path):
		p = tmp_path / "book.txt"
		p.write_bytes("第1章 A\n　foo\u2028bar\x0cbaz\r\n　next\r".encode("utf-8"))
		assert read_lines(p) == ["第1章 A", "　foo\u2028bar\x0cbaz", "　next"]

	def test_read_lines_empty_file(self, tmp_path: Path):
		p = tmp_path / "book.txt"
		p.write_bytes(b"")
		assert read_lines(p) == []

	def test_book_paths(self, tmp_path: Path):
		paths = book_paths("in.txt", tmp_path / "out", "a/b")
		assert paths.epub == tmp_path / "out" / "a_b.epub"
		paths.ensure_dirs()
		assert paths.out_dir.is_dir()


def _clear_env(monkeypatch) -> None:
	# 先 setenv 再 delenv：teardown 时能把 load_dotenv 写进去的值一并清掉
	for k in ("NOVEL2EPUB_ENCODING", "NOVEL2EPUB_OUT_DIR", "NOVEL2EPUB_LANGUAGE"):
		monkeypatch.setenv(k, "")
		monkeypatch.delenv(k)


class TestConfig:
	def test_defaults(self, tmp_path: Path, monkeypatch):
		_clear_env(monkeypatch)
		cfg = load_config(project_root=str(tmp_path))
		assert (cfg.encoding, cfg.out_dir, cfg.language) == ("utf-8", ".", "zh")

	def test_dotenv_and_explicit_override(self, tmp_path: Path, monkeypatch):
		_clear_env(monkeypatch)
		(tmp_path / ".env").write_text(
			"NOVEL2EPUB_ENCODING=gb18030\nNOVEL2EPUB_OUT_DIR=out\n",
			encoding="utf-8",
		)
		cfg = load_config(project_root=str(tmp_path), out_dir="explicit")
		assert cfg.encoding == "gb18030"
		assert cfg.out_dir == "explicit"
		assert cfg.language == "zh"
