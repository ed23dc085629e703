# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: 
"""
import sys

sys.path.append('..')
from cmdquote import Platform, parse, quote

if __name__ == '__main__':
    args = ["git", "commit", "-m", "it's \"done\"", "C:\\Program Files\\"]
    for platform in Platform:
        command_line = quote(platform, args)
        print(f"{platform.value}: {command_line}")
        print(f"  parsed back: {parse(platform, command_line)}")
