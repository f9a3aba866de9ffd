# -*- coding: utf-8 -*-
"""
novel2epub/core/io.py

目的：
- 统一读取小说 txt（编码、BOM、换行）。
- 统一管理输出路径约定：<out_dir>/<书名>.epub。

为什么要做这层：
- 解析器只吃“行”，不关心文件；orchestrator 只关心路径，不手写拼接。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List


# 只认 \r\n / \r / \n 为换行；str.splitlines 还会在 \x0c、\u2028 等字符处断行
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class BookPaths:
	"""
	一次转换涉及的路径。

	注意：
	- 只存路径，不做读写。
	- ensure_dirs() 负责创建输出目录。
	"""
	in_path: Path
	out_dir: Path
	epub: Path

	def ensure_dirs(self) -> None:
		self.out_dir.mkdir(parents=True, exist_ok=True)


def safe_filename(name: str) -> str:
	"""书名里的路径分隔符替换成 "_"，避免写到别的目录。"""
	return name.replace("/", "_").replace("\\", "_")


def book_paths(in_path: str | Path, out_dir: str | Path, title: str) -> BookPaths:
	out = Path(out_dir)
	return BookPaths(
		in_path=Path(in_path),
		out_dir=out,
		epub=out / f"{safe_filename(title)}.epub",
	)


def read_lines(path: str | Path, encoding: str = "utf-8") -> List[str]:
	"""
	读入 txt，返回不带换行符的行列表。

	- utf-8 自动去掉开头的 BOM（按 utf-8-sig 解码）
	- 只按 CRLF / CR / LF 分行，正文里的换页符、行分隔符（U+2028）等原样保留
	- 解码失败直接抛出：编码不对属于致命错误，由调用方决定怎么提示
	"""
	enc = encoding.strip() or "utf-8"
	if enc.lower().replace("_", "-") in ("utf-8", "utf8"):
		enc = "utf-8-sig"

	text = Path(path).read_bytes().decode(enc)
	lines = _NEWLINE_RE.split(text)
	if lines and lines[-1] == "":
		lines.pop()
	return lines
