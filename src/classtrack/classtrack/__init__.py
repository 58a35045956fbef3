"""ClassTrack package.

Feature modules (timetable, attendance, stats) hold pure computation over
already-loaded collections; a thin Flask controller layer exposes them as JSON.
"""
