"""
Service layer for video ingestion.

This module contains the pieces of the upload pipeline that don't touch the
database: naming, auth, ffprobe/ffmpeg wrappers and the object store
gateway. They are composed by videos/ingest.py.
"""
