# -*- coding: utf-8 -*-
"""
novel2epub/__main__.py

`python -m novel2epub convert --in_path 书.txt` 与安装后的 `novel2epub` 命令等价。
参数解析和转换都在 cli.py / orchestrator 里，这里只转发。
"""

from .cli import main

if __name__ == "__main__":
	main()
