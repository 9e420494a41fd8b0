#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
shifterapi包的安装脚本
"""

from setuptools import setup, find_packages
import os

# 获取包的版本号
try:
    with open(os.path.join('shifterapi', '__init__.py'), 'r', encoding='utf-8') as f:
        for line in f:
            if line.startswith('__version__'):
                version = line.strip().split('=')[1].strip().strip('"').strip("'")
                break
        else:
            version = '0.1.0'
except OSError:
    version = '0.1.0'

# 读取README文件内容
try:
    with open('README.md', 'r', encoding='utf-8') as f:
        long_description = f.read()
except OSError:
    long_description = "Shifter Web Scraping API 异步客户端"

# 定义依赖项
install_requires = [
    'aiohttp>=3.8.0',
    'multidict>=6.0',
    'PyYAML>=5.4',
]

extras_require = {
    'test': [
        'pytest>=7.0',
    ],
}

# 设置包的配置
setup(
    name='shifterapi',
    version=version,
    description='Shifter Web Scraping API 异步客户端',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='PyHack-Lab',
    author_email='',
    url='',
    packages=find_packages(include=['shifterapi', 'shifterapi.*']),
    package_data={
        'shifterapi': ['default_config.yaml'],
    },
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries',
    ],
    keywords='web-scraping, scraping-api, proxy, aiohttp',
)
