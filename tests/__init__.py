"""Test package for Codex Chatbot.

Structure:
    - unit/: Controller, transcript, config, theme and session adapter tests
    - integration/: HTTP app tests through ASGITransport

The remote Gemini API is never called; session factories are faked.
Leverages pytest with pytest-check for soft assertions.
"""
