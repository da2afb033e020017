"""wikisearch: boolean search result algebra over an inverted wiki index."""
