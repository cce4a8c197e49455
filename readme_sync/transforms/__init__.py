"""Row and title transform factories."""
