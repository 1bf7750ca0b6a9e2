"""Legal chat assistant.

Answers questions against a user-supplied set of Vietnamese legal documents,
ranked by legal authority and handed to a Gemini chat model as grounding.
"""

__version__ = "0.1.0"
