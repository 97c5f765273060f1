"""
Fakes for testing scripts built on L{twisted.python.usage.Options}.
"""
from twisted.trial.unittest import SynchronousTestCase


class _FakeOptions(dict):
    """
    A fake L{twisted.python.usage.Options} that records what it was
    asked to parse and may be told to reject it.

    @ivar parseOptions_calls: The argument lists passed to
        L{parseOptions}.

    @ivar parseOptions_raises: An exception L{parseOptions} raises, or
        C{None}.
    """

    def __init__(self, *args, **kwargs):
        dict.__init__(self, *args, **kwargs)
        self.parseOptions_calls = []
        self.parseOptions_raises = None

    def parseOptions(self, argv):
        self.parseOptions_calls.append(argv)
        if self.parseOptions_raises:
            raise self.parseOptions_raises


class _SystemExit(Exception):
    """
    A fake L{SystemExit}.
    """


class _OptionsTestCaseMixin(SynchronousTestCase):
    """
    Eases testing a real L{twisted.python.usage.Options}.

    @ivar required_args: Arguments appended to every parsed command line.
    @ivar options_factory: A no-argument callable returning the options
        under test.
    """
    required_args = ()

    def setUp(self):
        super(_OptionsTestCaseMixin, self).setUp()
        self.config = self.options_factory()

    def assert_option(self, option_inputs, option_name, expected_value):
        """
        Assert that C{option_inputs} is parsed into C{expected_value},
        found under C{option_name}.
        """
        self.config.parseOptions(option_inputs + list(self.required_args))
        self.assertEqual(self.config[option_name], expected_value)


class _ScriptTestCaseMixin(SynchronousTestCase):
    """
    Replaces the terminal and process facing parts of a script.

    @ivar print_calls: The arguments of every fake L{print}.
    @ivar exit_calls: The codes of every fake L{sys.exit}.
    @ivar getpass_calls: The prompts of every fake L{getpass.getpass}.
    @ivar getpass_returns: What the fake L{getpass.getpass} answers.
    """

    argv0 = "argv0"

    def setUp(self):
        super(_ScriptTestCaseMixin, self).setUp()
        self.print_calls = []
        self.exit_calls = []
        self.getpass_calls = []
        self.getpass_returns = "password"

    def fake_print(self, *args):
        self.print_calls.append(args)

    def fake_exit(self, code):
        """
        Record C{code}.

        @raises: L{_SystemExit}
        """
        self.exit_calls.append(code)
        raise _SystemExit(code)

    def fake_getpass(self, prompt):
        self.getpass_calls.append(prompt)
        return self.getpass_returns
