"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps raise sites short while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def start_index_negative(start_index: int) -> Diagnostic:
        """Start index is below zero.

        Args:
            start_index: The rejected start index

        Returns:
            Diagnostic for START_INDEX_NEGATIVE
        """
        msg = f"Start index {start_index} is less than zero"
        return Diagnostic(
            code=DiagnosticCode.START_INDEX_NEGATIVE,
            message=msg,
            hint="Start indexes are 0-based character offsets",
            argument_name="start_index",
            received_value=repr(start_index),
        )

    @staticmethod
    def start_index_out_of_range(start_index: int, length: int) -> Diagnostic:
        """Start index lies past the end of the text.

        Args:
            start_index: The rejected start index
            length: Length of the text in characters

        Returns:
            Diagnostic for START_INDEX_OUT_OF_RANGE
        """
        msg = f"Start index {start_index} is beyond the end of a text of length {length}"
        return Diagnostic(
            code=DiagnosticCode.START_INDEX_OUT_OF_RANGE,
            message=msg,
            hint=f"Use a start index between 0 and {length}",
            argument_name="start_index",
            received_value=repr(start_index),
        )

    @staticmethod
    def search_window_empty(start_index: int, search_length: int) -> Diagnostic:
        """Resolved search window holds no characters.

        Args:
            start_index: Window start
            search_length: Requested search length

        Returns:
            Diagnostic for SEARCH_WINDOW_EMPTY
        """
        msg = (
            f"Search window starting at {start_index} with requested length "
            f"{search_length} contains no characters"
        )
        return Diagnostic(
            code=DiagnosticCode.SEARCH_WINDOW_EMPTY,
            message=msg,
            hint="Pass a non-empty text, a start index before its end and a non-zero length",
            argument_name="search_length",
            received_value=repr(search_length),
        )

    @staticmethod
    def source_argument_invalid(argument_name: str, expected: str, received: object) -> Diagnostic:
        """Text or window argument of a RuneSource has the wrong type.

        Args:
            argument_name: Name of the argument
            expected: Expected type name
            received: The value that was passed

        Returns:
            Diagnostic for SOURCE_ARGUMENT_INVALID
        """
        msg = f"{argument_name} must be {expected}, got {type(received).__name__}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_ARGUMENT_INVALID,
            message=msg,
            hint="Pass the text as str and the window bounds as int",
            argument_name=argument_name,
            received_value=repr(received),
        )

    @staticmethod
    def negative_sign_spec_empty() -> Diagnostic:
        """Negative sign spec has neither a leading nor a trailing marker.

        Returns:
            Diagnostic for NEGATIVE_SIGN_SPEC_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_SIGN_SPEC_EMPTY,
            message="Negative sign spec has empty leading and trailing markers",
            hint="Provide a leading marker, a trailing marker, or both",
        )

    @staticmethod
    def negative_sign_set_empty() -> Diagnostic:
        """Negative sign candidate set holds no candidates.

        Returns:
            Diagnostic for NEGATIVE_SIGN_SET_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_SIGN_SET_EMPTY,
            message="Negative sign candidate set is empty",
            hint="Add at least one NegativeSignSpec, e.g. NegativeSignSpec.leading('-')",
        )

    @staticmethod
    def spec_contains_digit(field_name: str, chars: str) -> Diagnostic:
        """Marker contains a decimal digit and could never match.

        Args:
            field_name: Name of the offending field
            chars: The rejected marker

        Returns:
            Diagnostic for SPEC_CONTAINS_DIGIT
        """
        msg = f"{field_name} {chars!r} contains a decimal digit"
        return Diagnostic(
            code=DiagnosticCode.SPEC_CONTAINS_DIGIT,
            message=msg,
            hint="Digits are always consumed as part of the number; use non-digit markers",
            argument_name=field_name,
            received_value=repr(chars),
        )

    @staticmethod
    def terminator_empty(index: int) -> Diagnostic:
        """Terminator sequence is empty.

        Args:
            index: Position of the empty terminator in the collection

        Returns:
            Diagnostic for TERMINATOR_EMPTY
        """
        msg = f"Terminator at position {index} is empty"
        return Diagnostic(
            code=DiagnosticCode.TERMINATOR_EMPTY,
            message=msg,
            hint="An empty terminator would match everywhere; remove it",
            argument_name="terminators",
        )

    @staticmethod
    def spec_type_invalid(argument_name: str, expected: str, received: object) -> Diagnostic:
        """Configuration argument has the wrong type.

        Args:
            argument_name: Name of the argument
            expected: Expected type name
            received: The value that was passed

        Returns:
            Diagnostic for SPEC_TYPE_INVALID
        """
        msg = f"{argument_name} must be {expected}, got {type(received).__name__}"
        return Diagnostic(
            code=DiagnosticCode.SPEC_TYPE_INVALID,
            message=msg,
            argument_name=argument_name,
            received_value=repr(received),
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale code not recognized by CLDR.

        Args:
            locale_code: The rejected locale code
            reason: Underlying Babel error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX locale code such as 'en-US' or 'de_DE'",
            argument_name="locale_code",
            received_value=repr(locale_code),
        )
