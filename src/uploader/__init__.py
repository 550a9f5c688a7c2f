"""Command-line uploader for TrainingPeaks structured workouts."""
