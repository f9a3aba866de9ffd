# -*- coding: utf-8 -*-
"""
novel2epub/pipeline/orchestrator.py

目的：
- 作为“转换调度器”：读入 -> 逐行解析 -> 章节排序 -> 打包 -> 写盘。
- CLI 不直接调用解析器/打包器，统一走这里。

注意：
- 逐行的失败只往 stderr 打印 [WARN]，继续处理下一行。
- 读文件、写 EPUB 的失败直接抛出，整次转换中止。
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from novel2epub.core.config import ConverterConfig
from novel2epub.core.io import book_paths, read_lines
from novel2epub.core.line_parser import LineOutcome, scan_line
from novel2epub.core.schemas.novel import Novel
from novel2epub.providers.epub.ebooklib_packager import build_epub, sections_from_novel, write_epub


@dataclass
class ParseResult:
	novel: Novel
	# (行号, 原文, 归类结果)，行号从 1 开始
	unknown: List[Tuple[int, str, LineOutcome]] = field(default_factory=list)


def parse_lines(lines: Iterable[str]) -> ParseResult:
	result = ParseResult(novel=Novel())
	last_unknown = False

	for line_no, line in enumerate(lines, start=1):
		outcome = scan_line(line, result.novel, last_unknown)
		last_unknown = outcome.is_unknown
		if last_unknown:
			result.unknown.append((line_no, line, outcome))
			print(f"[WARN] unknown line {line_no} ({outcome.reason}): {line}", file=sys.stderr)

	return result


def chapter_index(novel: Novel) -> List[Dict[str, Any]]:
	return [
		{
			"id": ch.id,
			"title": ch.title,
			"heading": ch.heading,
			"lines": len(ch.lines),
		}
		for ch in novel.chapters
	]


def convert_file(in_path: str | Path, cfg: ConverterConfig) -> Path:
	in_path = Path(in_path)

	print(f"[RUN] processing {in_path}")
	lines = read_lines(in_path, encoding=cfg.encoding)

	print("[RUN] parsing")
	result = parse_lines(lines)
	novel = result.novel
	novel.sort_chapters()
	print(f"[OK] parsed chapters={len(novel.chapters)} unknown_lines={len(result.unknown)}")

	if not novel.title:
		print("[INFO] novel doesn't have a title, use file name instead")
		novel.title = in_path.stem

	paths = book_paths(in_path, cfg.out_dir, novel.title)
	paths.ensure_dirs()

	print("[RUN] converting to epub")
	book = build_epub(novel.title, novel.author, sections_from_novel(novel), language=cfg.language)

	write_epub(book, paths.epub)
	print(f"[OK] {paths.epub}")
	return paths.epub
