"""Tests for memo / forwardRef wrapper detection."""

import pytest

from propsguard.rules.react.wrapper_detection import (
    WrapperInfo,
    WrapperKind,
    detect_wrapper,
)


class TestDirectWrap:
    """Function passed straight to the wrapping call."""

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("memo(({ a }) => null);", WrapperInfo(WrapperKind.MEMO, qualified=False)),
            (
                "forwardRef((p, ref) => null);",
                WrapperInfo(WrapperKind.FORWARD_REF, qualified=False),
            ),
            ("React.memo(({ a }) => null);", WrapperInfo(WrapperKind.MEMO, qualified=True)),
            (
                "React.forwardRef(function Input(p, ref) { return null; });",
                WrapperInfo(WrapperKind.FORWARD_REF, qualified=True),
            ),
        ],
    )
    def test_recognized_callees(self, first_function, code, expected):
        assert detect_wrapper(first_function(code)) == expected

    def test_unrelated_callee(self, first_function):
        assert detect_wrapper(first_function("useCallback(({ a }) => a, []);")) is None

    def test_other_namespace_not_recognized(self, first_function):
        assert detect_wrapper(first_function("Preact.memo(({ a }) => null);")) is None

    def test_names_are_case_sensitive(self, first_function):
        assert detect_wrapper(first_function("Memo(({ a }) => null);")) is None
        assert detect_wrapper(first_function("forwardref(({ a }) => null);")) is None

    def test_none_input(self):
        assert detect_wrapper(None) is None


class TestIndirectWrap:
    """Function nested inside the initializer of a wrapped declarator."""

    def test_through_conditional(self, first_function):
        fn = first_function("const Button = memo(flag ? ({ a }) => null : Fallback);")
        assert detect_wrapper(fn) == WrapperInfo(WrapperKind.MEMO, qualified=False)

    def test_through_parentheses(self, first_function):
        fn = first_function("const Input = React.forwardRef((({ a }, ref) => null));")
        assert detect_wrapper(fn) == WrapperInfo(WrapperKind.FORWARD_REF, qualified=True)

    def test_plain_declarator(self, first_function):
        assert detect_wrapper(first_function("const Card = ({ a }) => null;")) is None

    def test_stops_at_first_declarator(self, functions):
        fns = functions(
            """
            const Outer = memo(() => {
              const Inner = ({ a }) => a;
              return null;
            });
            """
        )
        outer, inner = fns
        assert detect_wrapper(outer) == WrapperInfo(WrapperKind.MEMO, qualified=False)
        assert detect_wrapper(inner) is None

    def test_walks_through_enclosing_function(self, functions):
        fns = functions(
            """
            const Outer = memo(function () {
              function Row({ a }) { return a; }
              return null;
            });
            """
        )
        assert detect_wrapper(fns[1]) == WrapperInfo(WrapperKind.MEMO, qualified=False)

    def test_callback_inside_wrapped_body(self, functions):
        fns = functions(
            """
            const Card = forwardRef(() => {
              return <List onSelect={function ({ id }) { track(id); }} />;
            });
            """
        )
        assert detect_wrapper(fns[1]) == WrapperInfo(WrapperKind.FORWARD_REF, qualified=False)

    def test_reaches_root_without_declarator(self, first_function):
        assert detect_wrapper(first_function("export default ({ a }) => null;")) is None
