"""NiceGUI interface - thin visualization layer for the conversation.

Responsibilities:
    - Transcript display with role labels and timestamps
    - Text input with Enter-to-send and a send button
    - Dark/light theme switch
    - Toast notifications and session reconnect

Contains no conversation logic. Delegates all state changes to the
ConversationController.
"""
