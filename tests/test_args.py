"""Tests for govc argument building and the shell-like tokenizer."""

from govcmcp.args import JSON_FLAG, build_args, split_args


class TestBuildArgs:
    """Test option/positional serialization."""

    def test_json_flag_prepended(self) -> None:
        """-json comes first when structured output is requested."""
        assert build_args({"vm": "web01"}, ["x"]) == ["-json", "-vm", "web01", "x"]

    def test_json_flag_omitted(self) -> None:
        """No -json token when text output is requested."""
        assert build_args({"vm": "web01"}, json=False) == ["-vm", "web01"]
        assert JSON_FLAG not in build_args({}, json=False)

    def test_booleans_are_explicit(self) -> None:
        """False is written out, never dropped."""
        args = build_args({"on": True, "link": False}, json=False)
        assert args == ["-on=true", "-link=false"]

    def test_empty_values_skipped(self) -> None:
        """None and empty string are omitted entirely."""
        args = build_args({"a": None, "b": "", "c": "x"}, json=False)
        assert args == ["-c", "x"]

    def test_numbers_stringified(self) -> None:
        """Numbers become their string form, zero included."""
        args = build_args({"c": 4, "m": 2048.5, "zero": 0}, json=False)
        assert args == ["-c", "4", "-m", "2048.5", "-zero", "0"]

    def test_option_order_preserved(self) -> None:
        """Flags follow the mapping's insertion order."""
        args = build_args({"z": "1", "a": "2", "m": "3"}, json=False)
        assert args == ["-z", "1", "-a", "2", "-m", "3"]

    def test_positionals_appended_unchanged(self) -> None:
        """Positional arguments are appended verbatim after the flags."""
        args = build_args({"r": True}, ["/DC/vm/my vm", "-odd"], json=False)
        assert args == ["-r=true", "/DC/vm/my vm", "-odd"]

    def test_dotted_and_dashed_keys(self) -> None:
        """Keys with dots and dashes are passed through as flag names."""
        args = build_args({"net.adapter": "vmxnet3", "drs-enabled": True}, json=False)
        assert args == ["-net.adapter", "vmxnet3", "-drs-enabled=true"]


class TestSplitArgs:
    """Test the shell-like tokenizer."""

    def test_plain_split(self) -> None:
        """Unquoted spaces separate tokens."""
        assert split_args("a b c") == ["a", "b", "c"]

    def test_double_quoted_span(self) -> None:
        """A double-quoted span with spaces is one token."""
        assert split_args('a "b c" d') == ["a", "b c", "d"]

    def test_single_quoted_span(self) -> None:
        """A single-quoted span with spaces is one token."""
        assert split_args("vm.info '/DC/vm/my vm'") == ["vm.info", "/DC/vm/my vm"]

    def test_other_quote_kept_inside_span(self) -> None:
        """The other quote character is literal inside a span."""
        assert split_args("\"it's here\"") == ["it's here"]

    def test_repeated_spaces(self) -> None:
        """Runs of spaces produce no empty tokens."""
        assert split_args("  a   b  ") == ["a", "b"]

    def test_empty_input(self) -> None:
        """Blank input yields no tokens."""
        assert split_args("") == []
        assert split_args("   ") == []

    def test_unterminated_quote_runs_to_end(self) -> None:
        """An unterminated quote swallows the rest of the input."""
        assert split_args('a "b c d') == ["a", "b c d"]

    def test_quote_joins_adjacent_text(self) -> None:
        """A quoted span joins the text around it."""
        assert split_args('-name="my vm" x') == ["-name=my vm", "x"]

    def test_empty_quotes_produce_no_token(self) -> None:
        """An empty quoted span adds nothing."""
        assert split_args('a "" b') == ["a", "b"]
