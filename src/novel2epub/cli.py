# -*- coding: utf-8 -*-
"""
novel2epub/cli.py

目的：
- 提供项目的命令行入口。
- convert：把一本 txt 小说转换成 <书名>.epub。
- index：只解析，不打包；把书名、作者、章节索引以 JSON 打到 stdout，便于检查排序/缺章。

注意：
- CLI 不做业务细节：不解析小说、不拼 EPUB。
- CLI 只负责参数解析 + 配置加载，然后把任务交给 orchestrator。
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(
		prog="novel2epub",
		description="Plain-text Chinese novel -> EPUB",
	)

	sub = p.add_subparsers(dest="cmd", required=True)

	convp = sub.add_parser("convert", help="Convert a novel txt into <title>.epub")
	convp.add_argument("--in_path", required=True, help="输入：整本小说 txt")
	convp.add_argument("--out_dir", default=None, help="输出目录，缺省读 NOVEL2EPUB_OUT_DIR 或当前目录")
	convp.add_argument("--encoding", default=None, help="输入编码，缺省读 NOVEL2EPUB_ENCODING 或 utf-8")
	convp.add_argument("--language", default=None, help="EPUB 语言，缺省 zh")

	idxp = sub.add_parser("index", help="Parse only and print the chapter index as JSON")
	idxp.add_argument("--in_path", required=True)
	idxp.add_argument("--encoding", default=None)

	return p


def cmd_convert(in_path: str, out_dir: str | None = None, encoding: str | None = None, language: str | None = None) -> Path:
	from novel2epub.core.config import load_config
	from novel2epub.pipeline.orchestrator import convert_file

	src = Path(in_path)
	if not src.exists():
		raise FileNotFoundError(f"in_path not found: {src}")

	cfg = load_config(out_dir=out_dir, encoding=encoding, language=language)
	return convert_file(src, cfg)


def cmd_index(in_path: str, encoding: str | None = None) -> None:
	from novel2epub.core.config import load_config
	from novel2epub.core.io import read_lines
	from novel2epub.pipeline.orchestrator import chapter_index, parse_lines

	src = Path(in_path)
	if not src.exists():
		raise FileNotFoundError(f"in_path not found: {src}")

	cfg = load_config(encoding=encoding)
	result = parse_lines(read_lines(src, encoding=cfg.encoding))
	novel = result.novel
	novel.sort_chapters()

	data = {
		"title": novel.title,
		"author": novel.author,
		"unknown_lines": [no for no, _, _ in result.unknown],
		"chapters": chapter_index(novel),
	}
	print(json.dumps(data, ensure_ascii=False, indent=2))


def main(argv=None) -> None:
	args = build_parser().parse_args(argv)

	if args.cmd == "convert":
		cmd_convert(args.in_path, out_dir=args.out_dir, encoding=args.encoding, language=args.language)
		return

	if args.cmd == "index":
		cmd_index(args.in_path, encoding=args.encoding)
		return
