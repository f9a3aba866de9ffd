# -*- coding: utf-8 -*-
"""
providers/epub/ebooklib_packager.py

这个文件做什么：
- 把排好序的章节打包成 EPUB（基于 EbookLib）。
- 对外只要求：书名、作者、有序的 (heading, paragraphs) 列表。
- 每个章节一个 xhtml：<h1>heading</h1><p></p> + 每段一个 <p>。

约定：
- 作者为空时不写 creator。
- 任何一个章节挂不上去，整本失败（PackagerError），不产出半本书。
"""

from __future__ import annotations

import html
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from ebooklib import epub

from novel2epub.core.schemas.novel import Novel


class PackagerError(RuntimeError):
	"""EPUB 打包或写盘失败。"""


@dataclass
class Section:
	heading: str
	paragraphs: List[str] = field(default_factory=list)


def sections_from_novel(novel: Novel) -> List[Section]:
	"""按 novel.chapters 当前顺序生成 Section（调用前应先 sort_chapters）。"""
	return [Section(heading=ch.heading, paragraphs=list(ch.lines)) for ch in novel.chapters]


def render_section_body(section: Section) -> str:
	parts = [f"<h1>{html.escape(section.heading)}</h1>", "<p></p>"]
	for p in section.paragraphs:
		parts.append(f"<p>{html.escape(p)}</p>")
	return "\n".join(parts) + "\n"


def build_epub(
	title: str,
	author: str,
	sections: Sequence[Section],
	language: str = "zh",
) -> epub.EpubBook:
	book = epub.EpubBook()
	book.set_identifier(str(uuid.uuid4()))
	book.set_title(title)
	book.set_language(language)
	if author:
		book.add_author(author)

	docs: List[epub.EpubHtml] = []
	for i, section in enumerate(sections, start=1):
		try:
			doc = epub.EpubHtml(
				title=section.heading,
				file_name=f"section_{i:04d}.xhtml",
				lang=language,
			)
			doc.content = render_section_body(section)
			book.add_item(doc)
		except Exception as e:
			raise PackagerError(f"cannot add section {i} ({section.heading!r}): {e}") from e
		docs.append(doc)

	book.toc = docs
	book.add_item(epub.EpubNcx())
	book.add_item(epub.EpubNav())
	book.spine = ["nav", *docs]
	return book


def write_epub(book: epub.EpubBook, out_path: str | Path) -> Path:
	path = Path(out_path)
	try:
		# 先删掉上次的产物，下面的 is_file() 才能说明这次真的写成功了
		path.unlink(missing_ok=True)
		epub.write_epub(str(path), book)
	except Exception as e:
		raise PackagerError(f"cannot write {path}: {e}") from e

	# 部分 EbookLib 版本会吞掉 IOError，这里以文件是否落盘为准
	if not path.is_file():
		raise PackagerError(f"cannot write {path}")
	return path
