"""cloud toolbar - A PySide6 command toolbar for an rclone-style sync engine.

The package turns free-form text into ranked, executable actions:
- ``toolbar``: path extraction, the action catalog and the resolution engine
- ``rclone``: a small client for the engine's remote-control API
- ``dialogs``: the command palette widget
- ``core``: settings, logging, background workers and the single-instance guard

Run ``cloud-toolbar`` (or ``python -m cloud_toolbar``) to start the app.
"""

# Author: Rich Lewis - GitHub: @RichLewis007

__all__: list[str] = []
