"""
Error message definitions for the spreadsheet cell tools
Provides natural language error messages that explain what went wrong and how to fix it
"""

from enum import Enum

from openpyxl.utils.exceptions import InvalidFileException


class ErrorCategory(Enum):
    """Error category definitions"""

    INVALID_RANGE = "invalid_range"
    CELL_LOOKUP = "cell_lookup"
    INVALID_TARGET = "invalid_target"
    READ_ONLY_CELL = "read_only_cell"
    HYPERLINK_REMOVAL = "hyperlink_removal"
    CONFIGURATION = "configuration"
    WORKBOOK = "workbook"
    UNKNOWN = "unknown"


class SpreadsheetError(Exception):
    """Custom exception class for spreadsheet cell operations"""

    def __init__(
        self,
        category: ErrorCategory,
        message: str,
        solution: str,
        original_error: Exception | None = None,
    ):
        self.category = category
        self.message = message
        self.solution = solution
        self.original_error = original_error
        super().__init__(self.get_formatted_message())

    def get_formatted_message(self) -> str:
        """Get formatted error message"""
        return f"{self.message} {self.solution}"


def get_invalid_range_error(
    cell_range: str | None, original_error: Exception | None = None
) -> SpreadsheetError:
    """Generate invalid range error message"""
    if cell_range:
        message = f"Invalid cell range: '{cell_range}'."
    else:
        message = "The cell range could not be parsed."

    return SpreadsheetError(
        category=ErrorCategory.INVALID_RANGE,
        message=message,
        solution="Please specify a rectangular range in A1 notation with the upper-left cell first (e.g. 'A1:C3').",
        original_error=original_error,
    )


def get_cell_lookup_error(
    coordinate: str | None, original_error: Exception | None = None
) -> SpreadsheetError:
    """Generate cell lookup error message"""
    error_str = str(original_error).lower() if original_error else ""

    if coordinate:
        message = f"The cell at {coordinate} could not be resolved."
    else:
        message = "A cell in the range could not be resolved."

    if "merged" in error_str:
        solution = "The cell already belongs to another merged range. Unmerge that range first. The sheet may have been partially modified; re-verify it before reuse."
    else:
        solution = "Please verify the range lies within the sheet. The sheet may have been partially modified; re-verify it before reuse."

    return SpreadsheetError(
        category=ErrorCategory.CELL_LOOKUP,
        message=message,
        solution=solution,
        original_error=original_error,
    )


def get_invalid_target_error(
    original_error: Exception | None = None,
) -> SpreadsheetError:
    """Generate invalid target error message"""
    return SpreadsheetError(
        category=ErrorCategory.INVALID_TARGET,
        message="No target cell was given for the copy.",
        solution="Please pass an existing cell as the copy target.",
        original_error=original_error,
    )


def get_read_only_cell_error(
    coordinate: str | None, original_error: Exception | None = None
) -> SpreadsheetError:
    """Generate read-only cell error message"""
    if coordinate:
        message = f"The cell at {coordinate} is part of a merged range and is read-only."
    else:
        message = "The cell is part of a merged range and is read-only."

    return SpreadsheetError(
        category=ErrorCategory.READ_ONLY_CELL,
        message=message,
        solution="Write to the upper-left cell of the merged range, or unmerge the range first.",
        original_error=original_error,
    )


def get_hyperlink_removal_error(
    coordinate: str | None, original_error: Exception | None = None
) -> SpreadsheetError:
    """Generate hyperlink removal error message"""
    if coordinate:
        message = f"The hyperlink on {coordinate} could not be removed from the sheet."
    else:
        message = "A hyperlink could not be removed from the sheet."

    return SpreadsheetError(
        category=ErrorCategory.HYPERLINK_REMOVAL,
        message=message,
        solution="The installed openpyxl version may not be supported. Disable SHEET_TOOLS_STRICT_HYPERLINK_REMOVAL to continue with a warning instead.",
        original_error=original_error,
    )


def get_configuration_error(original_error: Exception) -> SpreadsheetError:
    """Generate configuration error message"""
    return SpreadsheetError(
        category=ErrorCategory.CONFIGURATION,
        message="There is a problem with the sheet tools configuration.",
        solution="Please check the SHEET_TOOLS_* environment variables and the arguments passed to the operation.",
        original_error=original_error,
    )


def get_workbook_error(
    file_path: str | None, original_error: Exception
) -> SpreadsheetError:
    """Generate workbook error message"""
    error_str = str(original_error).lower()

    if isinstance(original_error, FileNotFoundError):
        message = (
            f"The workbook was not found: {file_path}"
            if file_path
            else "The workbook was not found."
        )
        solution = "Please verify the file path is correct."
    elif isinstance(original_error, KeyError) or "worksheet" in error_str:
        message = "The requested worksheet does not exist in the workbook."
        solution = "Please check the sheet name. Sheet names are case-sensitive."
    else:
        message = "The workbook could not be opened."
        solution = "Please make sure the file is an .xlsx/.xlsm workbook and is not open in another program."

    return SpreadsheetError(
        category=ErrorCategory.WORKBOOK,
        message=message,
        solution=solution,
        original_error=original_error,
    )


def get_unknown_error(original_error: Exception) -> SpreadsheetError:
    """Generate unknown error message"""
    return SpreadsheetError(
        category=ErrorCategory.UNKNOWN,
        message="An unexpected error occurred.",
        solution="Please re-verify the sheet before reuse; it may have been partially modified.",
        original_error=original_error,
    )


def handle_spreadsheet_error(error: Exception, context: str = "") -> SpreadsheetError:
    """
    Classify spreadsheet-related errors into appropriate categories and generate natural language messages

    Args:
        error: The exception that occurred
        context: The context where the error occurred ("load", "merge", "copy", "clear", etc.)

    Returns:
        SpreadsheetError: Natural language error message
    """
    if isinstance(error, SpreadsheetError):
        return error

    error_str = str(error).lower()

    # Classification by exception type
    if isinstance(error, (InvalidFileException, FileNotFoundError)):
        return get_workbook_error(None, error)
    elif isinstance(error, KeyError) and context == "load":
        return get_workbook_error(None, error)
    elif isinstance(error, AttributeError) and "read-only" in error_str:
        return get_read_only_cell_error(None, error)

    # Classification by error message content
    if any(keyword in error_str for keyword in ["worksheet", "zip file", "workbook"]):
        return get_workbook_error(None, error)
    elif any(
        keyword in error_str
        for keyword in ["range", "coordinate", "boundaries", "column letter"]
    ):
        return get_invalid_range_error(None, error)
    elif any(keyword in error_str for keyword in ["row or column", "at least 1"]):
        return get_cell_lookup_error(None, error)
    elif any(keyword in error_str for keyword in ["config", "mode", "invalid"]):
        return get_configuration_error(error)
    else:
        return get_unknown_error(error)
