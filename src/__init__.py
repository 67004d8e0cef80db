"""Codex Chatbot - a Gemini-backed chat screen.

Combines NiceGUI for the chat page, FastAPI for hosting and health checks,
google-genai for the remote session, and Pydantic for data validation.

Components:
    - chat: Conversation controller, session lifecycle and configuration
    - api: HTTP application the UI is mounted on
    - ui: Web interface for chat interactions
    - models: Turn and history schemas
"""

__version__ = "0.1.0"
