from instacode.core.blocks import Block, BlockKind, BlockStack, BlockState, blocks_to_close


def _stack(*indents, auto_close=True):
    return [Block(BlockKind.CONDITIONAL, indent, auto_close) for indent in indents]


def test_regular_line_closes_blocks_at_or_right_of_its_column():
    stack = _stack(0, 4, 8)
    assert blocks_to_close(stack, 8, False) == 1
    assert blocks_to_close(stack, 4, False) == 2
    assert blocks_to_close(stack, 0, False) == 3
    assert blocks_to_close(stack, 12, False) == 0


def test_else_continuation_keeps_its_sibling_open():
    stack = _stack(0, 4)
    assert blocks_to_close(stack, 0, True) == 1
    assert blocks_to_close(stack, 4, True) == 0


def test_non_auto_close_blocks_stop_the_sweep():
    stack = [Block(BlockKind.LOOP, 0, True), Block(BlockKind.LOOP, 4, False), Block(BlockKind.LOOP, 8, True)]
    assert blocks_to_close(stack, 0, False) == 1


def test_empty_stack():
    assert blocks_to_close([], 0, False) == 0


def test_block_states():
    block = Block(BlockKind.CONDITIONAL, 0)
    assert block.state == BlockState.OPEN
    block.body_lines = 1
    assert block.state == BlockState.AWAITING_CONTINUATION
    block.has_else = True
    assert block.state == BlockState.OPEN

    stack = BlockStack()
    stack.push(block)
    assert stack.pop().state == BlockState.CLOSED


def test_else_errors():
    stack = BlockStack()
    assert "sin un 'si' previo" in stack.else_error(False)

    stack.push(Block(BlockKind.LOOP, 0))
    assert stack.else_error(True) is not None

    stack.push(Block(BlockKind.CONDITIONAL, 0))
    assert stack.else_error(True) is None
    stack.top().has_else = True
    assert "después de un 'sino' final" in stack.else_error(True)
    assert "ya tenía un 'sino'" in stack.else_error(False)
