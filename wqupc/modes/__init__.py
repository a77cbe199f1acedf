"""Execution modes driven by ``main.py``.

Each mode runs one study (connectivity sweep or sort benchmark), prints the
per-item console report and persists CSV / JSON / PNG artefacts into a run
directory.
"""
