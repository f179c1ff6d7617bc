"""
Env-Usage-Checker - 环境变量使用审计工具

对比源码中引用的环境变量与 .env 文件中声明的变量。
"""

__version__ = "0.1.0"
