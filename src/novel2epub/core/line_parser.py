# -*- coding: utf-8 -*-
"""
novel2epub/core/line_parser.py

这个文件做什么：
- 单遍、逐行地给小说 txt 的每一行“归类”，并把结果写进 Novel：
  1) 《书名》 - 作者：XXX      -> 书名/作者
  2) 空格或全角空格开头       -> 正文（追加到最后一个章节）
  3) 第X章 标题               -> 新章节（X 为阿拉伯或中文数字）
  4) 番外：...                -> 番外章节（id = -1）
  5) 其它                     -> 未知行
- 返回值只有一个布尔：这一行是否“未识别”。调用方用它维护 last_unknown。

为什么要有 last_unknown：
- 标题行写坏了（比如“第X节”），紧跟着的正文不能挂到上一章去，
  所以上一行未识别时，正文行也一律忽略，直到下一个有效标题。

注意：
- 解析器不打印任何东西；具体是哪种情况由 LineOutcome 区分，日志交给 orchestrator。
- 番外行会创建章节，但仍然返回“未识别”。这是既有行为，下游依赖它，不要“修”。
"""

from __future__ import annotations

import re
from enum import Enum

from novel2epub.core.numerals import ChapterNumberError, is_digit_char, parse_chapter_number
from novel2epub.core.schemas.novel import EXTRA_CHAPTER_ID, Novel


TITLE_OPEN = "《"
TITLE_CLOSE = "》"
AUTHOR_SEP = " - 作者："
CHAPTER_PREFIX = "第"
CHAPTER_SUFFIX = "章"
INDENT_CHARS = (" ", "　")
STRIP_CHARS = " \t　"

_EXTRA_CHAPTER_RE = re.compile(r"^番外：.*")


class LineOutcome(Enum):
	"""
	每一行的归类结果。value 的第二项是 is_unknown（返回给调用方的布尔）。
	"""
	TITLE = ("title", False)
	CHAPTER = ("chapter", False)
	CONTENT = ("content", False)
	EMPTY_CONTENT = ("empty content", False)
	ORPHAN_CONTENT = ("content before any chapter", False)
	EXTRA_CHAPTER = ("extra chapter", True)
	EMPTY_LINE = ("empty line", True)
	UNMATCHED_TITLE = ("novel title doesn't have matched angle quotation marks", True)
	WAITING_HEADER = ("waiting for next valid header", True)
	BAD_CHAPTER_HEADER = ("invalid title of chapter", True)
	BAD_CHAPTER_NUMBER = ("cannot parse id of chapter", True)
	UNKNOWN = ("unknown line", True)

	@property
	def reason(self) -> str:
		return self.value[0]

	@property
	def is_unknown(self) -> bool:
		return self.value[1]


def _scan_title(line: str, novel: Novel) -> LineOutcome:
	close = line.find(TITLE_CLOSE, 1)
	if close < 0:
		return LineOutcome.UNMATCHED_TITLE

	author = ""
	rest = line[close + 1:]
	if rest.startswith(AUTHOR_SEP):
		author = rest[len(AUTHOR_SEP):]

	novel.title = line[1:close]
	novel.author = author
	return LineOutcome.TITLE


def _scan_content(line: str, novel: Novel, last_unknown: bool) -> LineOutcome:
	if last_unknown:
		return LineOutcome.WAITING_HEADER

	body = line.lstrip(STRIP_CHARS)
	if not body:
		return LineOutcome.EMPTY_CONTENT

	if not novel.append_line(body):
		return LineOutcome.ORPHAN_CONTENT
	return LineOutcome.CONTENT


def _scan_chapter(line: str, novel: Novel) -> LineOutcome:
	i = len(CHAPTER_PREFIX)
	while i < len(line) and is_digit_char(line[i]):
		i += 1

	digits = line[len(CHAPTER_PREFIX):i]
	if not digits or i >= len(line) or line[i] != CHAPTER_SUFFIX:
		return LineOutcome.BAD_CHAPTER_HEADER

	try:
		chapter_id = parse_chapter_number(digits)
	except ChapterNumberError:
		return LineOutcome.BAD_CHAPTER_NUMBER

	# 跳过“章”和它后面的一个字符（通常是空格）
	novel.add_chapter(chapter_id, line[i + 2:])
	return LineOutcome.CHAPTER


def scan_line(line: str, novel: Novel, last_unknown: bool) -> LineOutcome:
	"""
	归类一行并修改 novel，返回具体的 LineOutcome。
	"""
	if not line:
		return LineOutcome.EMPTY_LINE

	first = line[0]

	if first == TITLE_OPEN:
		return _scan_title(line, novel)

	if first in INDENT_CHARS:
		return _scan_content(line, novel, last_unknown)

	if first == CHAPTER_PREFIX:
		return _scan_chapter(line, novel)

	if _EXTRA_CHAPTER_RE.match(line):
		novel.add_chapter(EXTRA_CHAPTER_ID, line)
		return LineOutcome.EXTRA_CHAPTER

	return LineOutcome.UNKNOWN


def classify_line(line: str, novel: Novel, last_unknown: bool) -> bool:
	"""
	归类一行；返回这一行是否“未识别”（作为下一次调用的 last_unknown）。
	"""
	return scan_line(line, novel, last_unknown).is_unknown
