#!/usr/bin/env python3
"""
Ordered recognizer catalogue.

Each line is offered to the recognizers in a fixed precedence order; the
first one that claims it wins. The order matters: broad shapes such as
``asignar <valor> a <nombre>`` and ``mostrar ...`` must come after the
narrower shapes that share their prefix.
"""

import logging
from typing import Callable, List, NamedTuple

from .instruction import Instruction
from .recognizers import arithmetic, collections, control, data, display, functions, structs, variables

NO_OP_LINES = ('comenzar programa', 'terminar programa')
NO_OP_PREFIXES = ('guardar los numeros en',)


class Recognizer(NamedTuple):
    name: str
    handler: Callable


RECOGNIZERS: List[Recognizer] = [
    Recognizer('variable_declaration', variables.declare_variable),
    Recognizer('function_definition', functions.define_function),
    Recognizer('function_return', functions.return_statement),
    Recognizer('function_call', functions.call_function),
    Recognizer('struct_definition', structs.define_struct),
    Recognizer('struct_collection', structs.create_struct_collection),
    Recognizer('struct_input', structs.input_struct_data),
    Recognizer('struct_display', structs.show_struct_collection),
    Recognizer('sum_and_show', arithmetic.sum_and_show),
    Recognizer('sum_numbers', arithmetic.sum_numbers),
    Recognizer('binary_arithmetic', arithmetic.binary_arithmetic),
    Recognizer('element_assignment', collections.assign_element),
    Recognizer('assignment', variables.assign_value),
    Recognizer('variable_update', variables.update_variable),
    Recognizer('calculation', variables.calculate_expression),
    Recognizer('collection_input', collections.collection_input),
    Recognizer('number_input', collections.request_number_input),
    Recognizer('scalar_input', variables.input_value),
    Recognizer('while_increase', control.while_increase),
    Recognizer('while_loop', control.while_loop),
    Recognizer('repeat_message', control.repeat_message),
    Recognizer('collection_creation', collections.create_collection),
    Recognizer('iterate_and_sum', collections.iterate_and_sum),
    Recognizer('add_element', collections.add_element),
    Recognizer('remove_element', collections.remove_element),
    Recognizer('sort_collection', collections.sort_collection),
    Recognizer('iterate_collection', collections.iterate_collection),
    Recognizer('if_condition', control.if_condition),
    Recognizer('print_pairs', display.print_pairs),
    Recognizer('print_collection', display.print_collection),
    Recognizer('show_message', display.show_message),
    Recognizer('read_data_file', data.read_data_file),
]


class InstructionDispatcher:
    def __init__(self, recognizers: List[Recognizer] = None):
        self.recognizers = list(recognizers) if recognizers is not None else list(RECOGNIZERS)
        self.logger = logging.getLogger(__name__)

    def is_no_op(self, text: str) -> bool:
        return text in NO_OP_LINES or text.startswith(NO_OP_PREFIXES)

    def dispatch(self, session, instruction: Instruction) -> bool:
        """Run the first recognizer that claims the line. False when none does."""
        session.instruction = instruction
        text = instruction.text
        if self.is_no_op(text):
            return True
        if instruction.is_else_continuation:
            self.logger.debug(f"línea {instruction.number}: sino")
            return control.handle_else(session, instruction)

        for recognizer in self.recognizers:
            if recognizer.handler(session, instruction):
                self.logger.debug(f"línea {instruction.number}: {recognizer.name}")
                return True
        return False
