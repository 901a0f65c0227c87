"""Job board package.

The package keeps the session state of a small job board in one place:
- `models.py` defines the job and application-draft schema.
- `sources/` contains the feed connector that fetches jobs.
- `normalize.py` turns the untrusted feed payload into `Job` records.
- `catalog.py`, `saved.py` and `workflow.py` hold the state the screens render.
- `screens.py` is the seam a UI layer talks to.
"""
