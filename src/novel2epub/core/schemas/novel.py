# -*- coding: utf-8 -*-
"""
novel2epub/core/schemas/novel.py

Novel / Chapter：解析器与打包器之间共享的文档结构。
- 解析阶段逐行追加（append-only）。
- 解析结束后按章节号排序一次，再交给打包器。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


# 番外章节的哨兵 id：不参与章节号语义，排序时排在所有正常章节前面
EXTRA_CHAPTER_ID = -1


@dataclass
class Chapter:
	"""
	一个章节。

	id：
	- 从“第X章”解析出的章节号；不保证唯一
	- EXTRA_CHAPTER_ID 表示番外

	title：
	- 章节标题（番外为整行原文）

	lines：
	- 正文段落，按输入顺序
	"""
	id: int
	title: str
	lines: List[str] = field(default_factory=list)

	@property
	def is_extra(self) -> bool:
		return self.id == EXTRA_CHAPTER_ID

	@property
	def heading(self) -> str:
		"""目录/正文标题：正常章节为 "<id> <title>"，番外只用 title。"""
		if self.is_extra:
			return self.title
		return f"{self.id} {self.title}"


@dataclass
class Novel:
	title: str = ""
	author: str = ""
	chapters: List[Chapter] = field(default_factory=list)

	def add_chapter(self, chapter_id: int, title: str) -> Chapter:
		ch = Chapter(id=chapter_id, title=title)
		self.chapters.append(ch)
		return ch

	def append_line(self, line: str) -> bool:
		"""
		把正文追加到最后一个章节。
		还没有任何章节时丢弃，返回 False。
		"""
		if not self.chapters:
			return False
		self.chapters[-1].lines.append(line)
		return True

	def sort_chapters(self) -> None:
		# sort 是稳定的：同 id（包括多个番外）保持输入顺序
		self.chapters.sort(key=lambda ch: ch.id)
