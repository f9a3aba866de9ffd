# -*- coding: utf-8 -*-
"""
novel2epub/core/numerals.py

目的：
- 把章节号（"第X章" 里的 X）转换为 int。
- X 可能是阿拉伯数字（"12"），也可能是中文数字（"十二"、"一百零五"）。
- 还有一种不规范写法："一二三"（每个字当作一位十进制数字），需要兜底。

解析顺序：
1) 首字符是 0-9：整串按十进制解析
2) 否则先按“规范的中文复合数字”解析（parse_compound_numeral）
3) 复合解析失败，再按逐字十进制拼接（parse_positional_digits）

注意：
- parse_compound_numeral 是纯函数，失败返回 None，不抛异常。
- 只有最后一步的失败才会以 ChapterNumberError 形式暴露给调用方。
"""

from __future__ import annotations

from typing import Optional


DIGITS = {
	"零": 0, "一": 1, "二": 2, "三": 3, "四": 4,
	"五": 5, "六": 6, "七": 7, "八": 8, "九": 9,
}

UNITS = {"十": 10, "百": 100, "千": 1000}

WAN = "万"

# 章节号上限：超出 int64 视为无法解析
MAX_CHAPTER_NUMBER = 2 ** 63 - 1


class ChapterNumberError(ValueError):
	"""章节号无法解析。"""


def is_arabic(ch: str) -> bool:
	return "0" <= ch <= "9"


def is_digit_char(ch: str) -> bool:
	"""
	章节号里允许出现的字符：0-9，以及 零一二三四五六七八九十百千万。
	"""
	return is_arabic(ch) or ch in DIGITS or ch in UNITS or ch == WAN


def char_value(ch: str) -> int:
	"""
	单个中文数字字符 -> 0..9。
	十百千万 不是“一位数字”，在这里算错误。
	"""
	if ch not in DIGITS:
		raise ChapterNumberError(f"not a chinese digit: {ch!r}")
	return DIGITS[ch]


def parse_compound_numeral(s: str) -> Optional[int]:
	"""
	规范的中文复合数字 -> int；不是规范写法则返回 None。

	支持：
	- "十二" = 12（开头的“十”可以省略“一”）
	- "二十三" = 23、"一百零五" = 105、"三千零一十" = 3010
	- "一万二千" = 12000（最多一个“万”）

	不接受：
	- 两个数字字紧挨着："一二三"、"二零"
	- 同一段（万以内）单位不递减："一十百"、"二百三百"
	- 单位前缺数字（开头的“十”除外）："百二"、"一百零十"
	"""
	if not s:
		return None

	total = 0
	section = 0
	number: Optional[int] = None
	zero = False
	last_unit = 10000
	seen_wan = False

	for i, ch in enumerate(s):
		if ch == "零":
			if number is not None:
				return None
			zero = True
			continue

		if ch in DIGITS:
			if number is not None:
				return None
			number = DIGITS[ch]
			continue

		if ch in UNITS:
			u = UNITS[ch]
			if u >= last_unit:
				return None
			if number is None:
				# 只有整串开头（或“万”之后）的“十”可以省略“一”
				if u != 10 or section != 0 or zero:
					return None
				if i != 0 and not seen_wan:
					return None
				number = 1
			section += number * u
			number = None
			zero = False
			last_unit = u
			continue

		if ch == WAN:
			if seen_wan:
				return None
			if number is not None:
				section += number
			if section == 0:
				return None
			total = section * 10000
			section = 0
			number = None
			zero = False
			last_unit = 10000
			seen_wan = True
			continue

		return None

	if number is not None:
		section += number

	return total + section


def parse_positional_digits(s: str) -> int:
	"""
	兜底：每个字当作一位十进制数字，从左到右拼起来。
	例："一二三" -> 123，"二零" -> 20。
	"""
	if not s:
		raise ChapterNumberError("empty chapter number")

	value = 0
	for ch in s:
		value = value * 10 + char_value(ch)
	return value


def _check_range(value: int) -> int:
	if value > MAX_CHAPTER_NUMBER:
		raise ChapterNumberError("chapter number out of range")
	return value


def parse_chapter_number(digits: str) -> int:
	"""
	章节号字符串 -> int，失败抛 ChapterNumberError。
	"""
	if not digits:
		raise ChapterNumberError("empty chapter number")

	if is_arabic(digits[0]):
		if not all(is_arabic(ch) for ch in digits):
			raise ChapterNumberError(f"invalid arabic chapter number: {digits!r}")
		# 逐位累加，不走 int(str)：超长数字串会触发解释器的位数上限
		value = 0
		for ch in digits:
			value = value * 10 + (ord(ch) - ord("0"))
		return _check_range(value)

	value = parse_compound_numeral(digits)
	if value is not None:
		return _check_range(value)

	return _check_range(parse_positional_digits(digits))
