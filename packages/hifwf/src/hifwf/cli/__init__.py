# packages/hifwf/src/hifwf/cli/__init__.py
