"""Unit tests for individual components in isolation.

Coverage:
    - chat/: Controller lifecycle, transcript, config, theme, Gemini adapter
    - models/: Turn validation

Uses fakes for the remote session and the notification surface.
"""
