"""crossorigin web layer — host ports and framework adapters.

The Starlette adapter lives in :mod:`crossorigin.web.adapters.starlette`.
"""
