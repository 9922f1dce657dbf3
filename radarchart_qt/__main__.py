"""
Entry point for `python -m radarchart_qt`.

Logging is configured at the top of app_qt.py; this module simply
delegates to app_qt.main().
"""

from radarchart_qt.app_qt import main

if __name__ == "__main__":
    main()
