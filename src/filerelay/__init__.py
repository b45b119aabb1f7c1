"""FileRelay: ephemeral in-memory file sharing behind short codes.

Uploads are kept in process memory for three hours and are addressed by a
six-character share code. The relay core lives in :mod:`.storage` and
:mod:`.relay`; the FastAPI app is assembled by :func:`.main.create_app`.
"""
