# -*- coding: utf-8 -*-
"""
novel2epub/core/config.py

这个文件做什么：
- 提供转换器的运行配置：输入编码、输出目录、EPUB 语言。
- 支持从项目根目录的 .env 读取配置，避免每次在命令行里重复传参。

配置来源优先级（从高到低）：
1) 显式传参（CLI 参数）
2) .env 文件
3) 系统环境变量
4) 默认值

.env 示例：
NOVEL2EPUB_ENCODING=gb18030
NOVEL2EPUB_OUT_DIR=output/epub
NOVEL2EPUB_LANGUAGE=zh
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class ConverterConfig:
	encoding: str = "utf-8"
	out_dir: str = "."
	language: str = "zh"


def _load_dotenv_if_present(project_root: Path) -> None:
	"""
	如果项目根目录存在 .env，则加载到 os.environ（不覆盖已有变量）。
	"""
	env_path = project_root / ".env"
	if env_path.exists():
		load_dotenv(dotenv_path=str(env_path), override=False)


def load_config(
	project_root: Optional[str] = None,
	encoding: Optional[str] = None,
	out_dir: Optional[str] = None,
	language: Optional[str] = None,
) -> ConverterConfig:
	root = Path(project_root or os.getcwd()).resolve()
	_load_dotenv_if_present(root)

	enc = (encoding or os.environ.get("NOVEL2EPUB_ENCODING", "")).strip() or "utf-8"
	out = (out_dir or os.environ.get("NOVEL2EPUB_OUT_DIR", "")).strip() or "."
	lang = (language or os.environ.get("NOVEL2EPUB_LANGUAGE", "")).strip() or "zh"

	return ConverterConfig(encoding=enc, out_dir=out, language=lang)
