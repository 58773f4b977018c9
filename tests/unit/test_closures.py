"""Closures capture their defining frame; writes search frames by name."""


def test_counter_closure_keeps_private_state(run_source):
    source = """
    def makeCounter() do
      let count = 0
      def increment() do
        count = count + 1
        return count
      end
      return increment
    end
    let a = makeCounter()
    let b = makeCounter()
    debug a()
    debug a()
    debug b()
    """
    assert run_source(source).splitlines() == ["1", "2", "1"]


def test_closure_sees_binding_from_definition_site(run_source):
    source = """
    let x = "global"
    do
      def show() do
        debug x
      end
      show()
      let x = "block"
      show()
    end
    """
    assert run_source(source).splitlines() == ["global", "global"]


def test_assignment_targets_nearest_frame_while_read_uses_global(run_source):
    # The read of `x` inside `touch` was resolved before the block declared
    # its own `x`, so it reads the global. The write searches the live frame
    # chain by name and lands in the block's `x`.
    source = """
    let x = "global"
    do
      def touch() do
        x = "written"
        debug x
      end
      let x = "block"
      touch()
      debug x
    end
    debug x
    """
    assert run_source(source).splitlines() == ["global", "written", "global"]


def test_function_parameters_shadow_globals(run_source):
    source = """
    let n = 10
    def twice(n) do
      return n * 2
    end
    debug twice(4)
    debug n
    """
    assert run_source(source).splitlines() == ["8", "10"]
