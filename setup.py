#!/usr/bin/env python3
# setup.py：安装博客发布工具
#
# 安装方式：
#   pip install -e .
#
# 启动方式：
#   deploy [提交信息...]
#   python main.py [提交信息...]

from setuptools import setup, find_packages

# 读取 README.md 作为长描述
try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "构建 Hugo 博客并发布到托管仓库"

setup(
    name="blog-deploy",
    version="1.0.0",
    author="qiao-925",
    description="构建 Hugo 博客并发布到托管仓库",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",  # 终端颜色（Windows 支持）
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "deploy=blog_deploy.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Version Control :: Git",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
