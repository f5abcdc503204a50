class NumberSorterError(Exception):
    """Base for errors the GUI turns into a dialog."""
    title = "Error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)
        self.message = str(self)

    default_message = "Something went wrong."


class InvalidCount(NumberSorterError):
    title = "Invalid Input"
    default_message = "Please enter a valid positive integer."


class SelectionTooLarge(NumberSorterError):
    title = "Invalid Selection"
    default_message = "Please select a value smaller or equal to 30."


class SortInProgress(NumberSorterError):
    title = "Sorting"
    default_message = "Wait for the current sort to finish."


class NothingToSort(NumberSorterError):
    title = "Nothing to sort"
    default_message = "Generate some numbers before sorting."
