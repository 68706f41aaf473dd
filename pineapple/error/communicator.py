import sys

from pineapple.util import Colors, Span, split_lines

# Diagnostics beyond this number are summarized instead of shown
MAX_SHOWN = 10


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        lines = split_lines(program)
        error_lines = lines[
            max(0, span.start_ln - n_before - 1) : max(0, span.end_ln + n_after)
        ]
        final_error_lines = []
        start_line_no = max(1, span.start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the code.
            # See the * in the following example:
            #    *8. $a = "x"
            # -> *9. $b =
            #    10. print($a)
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            final_line = ""
            if span.start_ln <= i <= span.end_ln:
                # First line
                if i == span.start_ln:
                    # Do not color outside of span on first line
                    final_line += f"-> {padding}{i}. {line[:span.start_col]}"

                    if span.multiline:
                        final_line += f"{color}{line[span.start_col:]}{Colors.ENDC}"
                    else:
                        final_line += (
                            f"{color}{line[span.start_col:span.end_col]}{Colors.ENDC}"
                        )
                        final_line += line[span.end_col :]

                # Lines (if any) between the first and last line
                elif span.start_ln < i < span.end_ln:
                    final_line += f"-> {padding}{i}. {color}{line}{Colors.ENDC}"
                # The last line, of a multiline
                else:
                    final_line += (
                        f"-> {padding}{i}. {color}{line[:span.end_col]}{Colors.ENDC}"
                    )
                    final_line += line[span.end_col :]

            else:
                final_line += f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        message = class_name + ": " + before
        if final_error_lines:
            message += "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Communicates all warnings and errors to the programmer
    # In case of any errors, parsing will stop with an exception
    @staticmethod
    def communicate(stage_of_exception) -> None:
        warnings = "".join(
            [str(warning) + "\n\n" for warning in WarningRaiser.WARNINGS[:MAX_SHOWN]]
        )
        if warnings:
            if len(WarningRaiser.WARNINGS) > MAX_SHOWN:
                omitted = len(WarningRaiser.WARNINGS) - MAX_SHOWN
                warnings += f"Showing {MAX_SHOWN} warnings, omitting {omitted} warning{'s' if omitted > 1 else ''}..."
            WarningRaiser.WARNINGS.clear()
            print("\n", warnings, file=sys.stderr)

        errors = "".join(
            ["\n\n" + str(error) for error in ErrorRaiser.ERRORS[:MAX_SHOWN]]
        )
        if errors:
            if len(ErrorRaiser.ERRORS) > MAX_SHOWN:
                omitted = len(ErrorRaiser.ERRORS) - MAX_SHOWN
                errors += f"\n\nShowing {MAX_SHOWN} errors, omitting {omitted} error{'s' if omitted > 1 else ''}..."
            raised = list(ErrorRaiser.ERRORS)
            ErrorRaiser.ERRORS.clear()
            raise stage_of_exception(errors, raised)


# Used to store all the accumulated warnings
class WarningRaiser:
    WARNINGS = []


# Used to store all the accumulated errors
class ErrorRaiser:
    ERRORS = []
