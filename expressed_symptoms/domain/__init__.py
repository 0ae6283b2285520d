"""Domain models for symptom tracking."""
