"""wordroots: morpheme-based vocabulary lessons and practice quizzes."""
