"""
Search module for the Prawn note editor.

Filters the FileIndex by a live query. The result list is recomputed from scratch
on every keystroke, which is plenty fast for a directory of notes.
"""

def filter_notes(notes, query: str) -> list:
    """
    Return the indices of `notes` whose display name contains `query`
    (case-sensitive), in their original order. An empty query matches everything.
    """
    return [i for i, note in enumerate(notes) if query in note.name]

class SearchFilter:
    """The current search query, its results and the result selection cursor."""
    def __init__(self):
        self.query = ""
        self.results = []
        self.selected = 0

    def reset(self, notes):
        """Start a fresh search: empty query, every note, cursor on the first one."""
        self.query = ""
        self.results = filter_notes(notes, "")
        self.selected = 0

    def set_query(self, notes, query: str):
        """Store `query`, recompute the results and re-clamp the cursor."""
        self.query = query
        self.results = filter_notes(notes, query)
        self.selected = max(0, min(self.selected, len(self.results) - 1))

    @property
    def has_results(self) -> bool:
        return bool(self.results)

    def select_next(self):
        if self.selected < len(self.results) - 1:
            self.selected += 1

    def select_previous(self):
        if self.selected > 0:
            self.selected -= 1

    def confirm(self) -> int:
        """
        Map the selected result back to its FileIndex index.
        Raises LookupError when there are no results.
        """
        if not self.results:
            raise LookupError("no search results")
        return self.results[self.selected]
