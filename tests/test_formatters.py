"""Tests for the text formatting strategies."""

import pytest
from textformatter.core import (
    ITextFormatter,
    UpperCaseFormatter,
    LowerCaseFormatter,
    TitleCaseFormatter,
)


SAMPLES = [
    "",
    "tHiS iS a TeSt",
    "hELLO, u$3r@bC!",
    "  leading and trailing  ",
    "tabs\tand\nnewlines",
    "o'neil and McDonald",
    "café ÉCOLE",
]


# ============================================================================
# Interface
# ============================================================================

class TestInterface:
    """Tests for the ITextFormatter abstraction."""
    
    def test_cannot_instantiate_interface(self):
        """Test the abstract interface cannot be created directly."""
        with pytest.raises(TypeError):
            ITextFormatter()
    
    def test_incomplete_subclass_fails(self):
        """Test a subclass missing name cannot be created."""
        class NoName(ITextFormatter):
            def format(self, text: str) -> str:
                return text
        
        with pytest.raises(TypeError):
            NoName()
    
    @pytest.mark.parametrize(
        "formatter, name",
        [
            (UpperCaseFormatter(), "Uppercase"),
            (LowerCaseFormatter(), "Lowercase"),
            (TitleCaseFormatter(), "Title Case"),
        ],
    )
    def test_names(self, formatter, name):
        """Test each formatter exposes its menu name."""
        assert isinstance(formatter, ITextFormatter)
        assert formatter.name == name
    
    def test_repr(self):
        """Test repr shows the concrete class."""
        assert repr(TitleCaseFormatter()) == "TitleCaseFormatter()"


# ============================================================================
# Uppercase / Lowercase
# ============================================================================

class TestUpperCaseFormatter:
    """Tests for UpperCaseFormatter."""
    
    def test_mixed_case(self):
        """Test mixed case sentence is uppercased."""
        assert UpperCaseFormatter().format("tHiS iS a TeSt") == "THIS IS A TEST"
    
    def test_symbols_pass_through(self):
        """Test non-letters are left unchanged."""
        assert UpperCaseFormatter().format("hELLO, u$3r@bC!") == "HELLO, U$3R@BC!"
    
    def test_empty(self):
        """Test empty string stays empty."""
        assert UpperCaseFormatter().format("") == ""
    
    def test_non_ascii_untouched(self):
        """Test only ASCII letters change case."""
        assert UpperCaseFormatter().format("café ß") == "CAFé ß"
    
    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        """Test a second pass changes nothing."""
        formatter = UpperCaseFormatter()
        once = formatter.format(text)
        assert formatter.format(once) == once
        assert len(once) == len(text)


class TestLowerCaseFormatter:
    """Tests for LowerCaseFormatter."""
    
    def test_mixed_case(self):
        """Test mixed case sentence is lowercased."""
        assert LowerCaseFormatter().format("tHiS iS a TeSt") == "this is a test"
    
    def test_symbols_pass_through(self):
        """Test non-letters are left unchanged."""
        assert LowerCaseFormatter().format("hELLO, u$3r@bC!") == "hello, u$3r@bc!"
    
    def test_empty(self):
        """Test empty string stays empty."""
        assert LowerCaseFormatter().format("") == ""
    
    def test_non_ascii_untouched(self):
        """Test only ASCII letters change case."""
        assert LowerCaseFormatter().format("ÉCOLE") == "École"
    
    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        """Test a second pass changes nothing."""
        formatter = LowerCaseFormatter()
        once = formatter.format(text)
        assert formatter.format(once) == once
        assert len(once) == len(text)


# ============================================================================
# Title case
# ============================================================================

class TestTitleCaseFormatter:
    """Tests for TitleCaseFormatter."""
    
    def test_mixed_case(self):
        """Test each word is capitalized and the rest lowercased."""
        assert TitleCaseFormatter().format("tHiS iS a TeSt") == "This Is A Test"
    
    def test_empty(self):
        """Test empty string stays empty."""
        assert TitleCaseFormatter().format("") == ""
    
    def test_symbols(self):
        """Test symbols inside words are kept and letters lowercased."""
        assert TitleCaseFormatter().format("hELLO, u$3r@bC!") == "Hello, U$3r@bc!"
    
    def test_already_capitalized_word_recased(self):
        """Test inner capitals are lowercased."""
        assert TitleCaseFormatter().format("McDonald") == "Mcdonald"
    
    def test_apostrophe_does_not_start_word(self):
        """Test punctuation does not reset the word start."""
        assert TitleCaseFormatter().format("o'neil") == "O'neil"
    
    def test_leading_punctuation_consumes_word_start(self):
        """Test a leading symbol takes the capitalization slot."""
        assert TitleCaseFormatter().format("(hello) world") == "(hello) World"
    
    def test_whitespace_preserved(self):
        """Test runs of whitespace of every kind are kept as-is."""
        text = "  two  spaces\tTAB\nnew\rcr\vvt\fff"
        assert TitleCaseFormatter().format(text) == "  Two  Spaces\tTab\nNew\rCr\vVt\fFf"
    
    def test_non_ascii_whitespace_is_not_a_separator(self):
        """Test a non-breaking space does not start a new word."""
        assert TitleCaseFormatter().format("a\u00a0b") == "A\u00a0b"
    
    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent_on_own_output(self, text):
        """Test a second pass over the output reproduces it."""
        formatter = TitleCaseFormatter()
        once = formatter.format(text)
        assert formatter.format(once) == once
        assert len(once) == len(text)
    
    @pytest.mark.parametrize("text", SAMPLES)
    def test_word_start_letters_upper_rest_lower(self, text):
        """Test letter casing follows word boundaries."""
        result = TitleCaseFormatter().format(text)
        at_start = True
        for char in result:
            if char in " \t\n\v\f\r":
                at_start = True
                continue
            if char.isascii() and char.isalpha():
                assert char.isupper() if at_start else char.islower()
            at_start = False
