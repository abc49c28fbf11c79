# faultscope/core/__init__.py
