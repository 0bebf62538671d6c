"""Run artifacts: event stream and screenshots."""
