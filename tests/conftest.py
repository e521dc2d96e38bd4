import pytest

from instacode import TranslationInput, TranslatorConfig, convert
from instacode.core.instruction import Instruction
from instacode.core.session import TranslationSession


@pytest.fixture
def translate():
    """Translate a script given as lines; returns the TranslationOutput."""
    def _translate(*lines, data="", data_name="", strict=False):
        config = TranslatorConfig()
        config.strict = strict
        return convert(TranslationInput('\n'.join(lines), data, data_name), config)
    return _translate


@pytest.fixture
def session():
    return TranslationSession()


@pytest.fixture
def run_line(session):
    """Feed lines one by one to a shared session through the dispatcher."""
    from instacode.core.dispatcher import InstructionDispatcher
    dispatcher = InstructionDispatcher()

    def _run(raw, number=1):
        ins = Instruction.from_raw(raw, number)
        session.instruction = ins
        session.close_stale_blocks(ins)
        return dispatcher.dispatch(session, ins)
    return _run
