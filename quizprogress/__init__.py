"""Learning progress and gamification service for quiz apps."""
