# -*- coding: utf-8 -*-
"""Pipeline 集成测试：txt -> parse -> sort -> epub，以及 CLI 入口。"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from ebooklib import epub

from novel2epub.cli import cmd_convert, main
from novel2epub.core.config import ConverterConfig
from novel2epub.pipeline.orchestrator import chapter_index, convert_file, parse_lines


NOVEL_TXT = (
	"《测试之书》 - 作者：张三\n"
	"第三章 Three\n"
	"　　third\n"
	"第一章 One\n"
	"　　first\n"
	"番外：Side\n"
	"第2章 Two\n"
	"　　second\n"
)


def test_convert_file_sorts_chapters(tmp_path: Path):
	in_file = tmp_path / "book.txt"
	in_file.write_text(NOVEL_TXT, encoding="utf-8")

	out = convert_file(in_file, ConverterConfig(out_dir=str(tmp_path / "out")))
	assert out == tmp_path / "out" / "测试之书.epub"
	assert out.is_file()

	book = epub.read_epub(str(out))
	assert book.get_metadata("DC", "title")[0][0] == "测试之书"
	assert book.get_metadata("DC", "creator")[0][0] == "张三"

	docs = sorted(
		(it for it in book.get_items() if "section_" in it.get_name()),
		key=lambda it: it.get_name(),
	)
	texts = [d.get_content().decode("utf-8") for d in docs]
	assert len(texts) == 4
	assert "Side" in texts[0]
	assert "1 One" in texts[1] and "first" in texts[1]
	assert "2 Two" in texts[2] and "second" in texts[2]
	assert "3 Three" in texts[3] and "third" in texts[3]


def test_convert_file_falls_back_to_file_stem(tmp_path: Path, capsys):
	in_file = tmp_path / "untitled.txt"
	in_file.write_text("第1章 A\n　a\n", encoding="utf-8")

	out = convert_file(in_file, ConverterConfig(out_dir=str(tmp_path)))
	assert out.name == "untitled.epub"
	assert "[INFO]" in capsys.readouterr().out

	book = epub.read_epub(str(out))
	assert book.get_metadata("DC", "title")[0][0] == "untitled"


def test_chapter_index_order():
	result = parse_lines(NOVEL_TXT.splitlines())
	result.novel.sort_chapters()
	idx = chapter_index(result.novel)
	assert [c["id"] for c in idx] == [-1, 1, 2, 3]
	assert idx[0]["heading"] == "番外：Side"
	assert idx[1]["heading"] == "1 One"
	assert idx[1]["lines"] == 1


def test_cli_index_prints_json(tmp_path: Path, capsys):
	in_file = tmp_path / "book.txt"
	in_file.write_text(NOVEL_TXT, encoding="utf-8")

	main(["index", "--in_path", str(in_file)])
	data = json.loads(capsys.readouterr().out)
	assert data["title"] == "测试之书"
	assert data["author"] == "张三"
	# 番外行本身计为未知行
	assert data["unknown_lines"] == [6]
	assert [c["id"] for c in data["chapters"]] == [-1, 1, 2, 3]


def test_cli_convert(tmp_path: Path):
	in_file = tmp_path / "book.txt"
	in_file.write_bytes(NOVEL_TXT.encode("gb18030"))

	out = cmd_convert(str(in_file), out_dir=str(tmp_path / "epub"), encoding="gb18030")
	assert out.is_file()
	assert out.parent == tmp_path / "epub"


def test_cli_convert_missing_input(tmp_path: Path):
	with pytest.raises(FileNotFoundError):
		main(["convert", "--in_path", str(tmp_path / "nope.txt")])
