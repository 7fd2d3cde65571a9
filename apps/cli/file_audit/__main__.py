"""
@PURPOSE: 使 file_audit 可以作为模块运行
@OUTLINE:
  - 导入并运行 main.py 中的 app
@DEPENDENCIES:
  - 内部: apps.cli.file_audit.main
"""

from apps.cli.file_audit.main import app

if __name__ == "__main__":
    app()
