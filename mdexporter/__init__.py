"""Export markdown notes with their linked notes and images."""
