"""Token-sequence plagiarism detection for source code submissions, with companion algorithms."""

__version__ = "0.1.0"