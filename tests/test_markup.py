from music_queue.i18n.markup import COLOR_TAGS, RESET, expand_tags, format, substitute

RED = COLOR_TAGS["red"]
BOLD = COLOR_TAGS["b"]


class TestSubstitute:
    def test_in_order(self):
        assert substitute("{} of {}", ["3", "5"]) == "3 of 5"

    def test_missing_args_keep_placeholders(self):
        assert substitute("{} - {} - {}", ["a"]) == "a - {} - {}"

    def test_extra_args_dropped(self):
        assert substitute("only {}", ["a", "b", "c"]) == "only a"

    def test_without_placeholders(self):
        assert substitute("plain text", ["ignored"]) == "plain text"

    def test_rerun_without_args(self):
        once = substitute("{} and {}", ["x"])
        assert substitute(once) == once

    def test_argument_containing_placeholder(self):
        assert substitute("{}/{}", ["{}", "b"]) == "{}/b"


class TestTags:
    def test_disabled(self):
        assert expand_tags("<red>x</red>", coloring=False) == "x"

    def test_enabled(self):
        assert expand_tags("<red>x</red>") == RESET + RED + "x" + RESET

    def test_nested(self):
        result = expand_tags("<b><red>x</red>y</b>")
        assert result == RESET + BOLD + RED + "x" + RESET + BOLD + "y" + RESET

    def test_unknown_tag_literal(self):
        assert expand_tags("<foo>x</foo>") == RESET + "<foo>x</foo>"
        assert expand_tags("<foo>x</foo>", coloring=False) == "<foo>x</foo>"

    def test_unknown_inside_known(self):
        result = expand_tags("<red><i>x</i></red>", coloring=False)
        assert result == "<i>x</i>"

    def test_unclosed_bracket(self):
        assert expand_tags("a < b", coloring=False) == "a < b"
        assert expand_tags("1 <red>2", coloring=True) == RESET + "1 " + RED + "2"

    def test_close_not_on_top(self):
        # Closing bold first keeps red active.
        result = expand_tags("<b><red>x</b>y</red>")
        assert result == (
            RESET + BOLD + RED + "x" + RESET + RED + "y" + RESET
        )

    def test_close_without_open(self):
        assert expand_tags("a</red>b") == RESET + "a" + RESET + "b"
        assert expand_tags("<b>a</red>b") == RESET + BOLD + "a" + RESET + BOLD + "b"
        assert expand_tags("a</red>b", coloring=False) == "ab"

    def test_repeated_tag_closes_latest(self):
        result = expand_tags("<red><b><red>x</red>y")
        assert result == RESET + RED + BOLD + RED + "x" + RESET + RED + BOLD + "y"

    def test_empty(self):
        assert expand_tags("", coloring=False) == ""
        assert expand_tags("") == RESET


class TestFormat:
    def test_substitution_before_tags(self):
        result = format("<green>{}</green> done", ["3"], coloring=False)
        assert result == "3 done"

    def test_argument_tags_are_processed(self):
        assert format("{}", ["<red>x</red>"], coloring=False) == "x"

    def test_zero_placeholders_only_process_tags(self):
        template = "<b>Title</b>: none"
        assert format(template, ["a", "b"], coloring=True) == expand_tags(template)

    def test_leftover_placeholders_order(self):
        result = format("{}|{}|{}|{}", ["a"], coloring=False)
        assert result == "a|{}|{}|{}"
        assert result.count("{}") == 3
