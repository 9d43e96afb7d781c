"""AI-generated multiple-choice quizzes."""
