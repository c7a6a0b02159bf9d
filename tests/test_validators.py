"""
Tests for the application field validators.
"""

from django.test import SimpleTestCase

from apps.core.validators import (
    is_valid_amount,
    is_valid_email,
    is_valid_full_name,
    is_valid_pan,
)


class EmailValidatorTests(SimpleTestCase):

    def test_valid_email(self):
        self.assertTrue(is_valid_email('rahul.sharma@example.com'))

    def test_subdomain(self):
        self.assertTrue(is_valid_email('a@mail.example.co.in'))

    def test_missing_at(self):
        self.assertFalse(is_valid_email('rahul.example.com'))

    def test_missing_dot_after_at(self):
        self.assertFalse(is_valid_email('rahul@example'))

    def test_space_rejected(self):
        self.assertFalse(is_valid_email('rahul sharma@example.com'))

    def test_empty_local_part(self):
        self.assertFalse(is_valid_email('@example.com'))

    def test_empty_string(self):
        self.assertFalse(is_valid_email(''))

    def test_trailing_newline_rejected(self):
        self.assertFalse(is_valid_email('rahul@example.com\n'))

    def test_non_string(self):
        self.assertFalse(is_valid_email(None))


class PANValidatorTests(SimpleTestCase):

    def test_valid_pan(self):
        self.assertTrue(is_valid_pan('ABCDE1234F'))

    def test_lowercase_rejected(self):
        """Callers upper-case first; lowercase is not accepted as-is."""
        self.assertFalse(is_valid_pan('abcde1234f'))

    def test_too_short(self):
        self.assertFalse(is_valid_pan('ABCDE1234'))

    def test_too_long(self):
        self.assertFalse(is_valid_pan('ABCDE1234FG'))

    def test_wrong_layout(self):
        self.assertFalse(is_valid_pan('ABCD12345F'))
        self.assertFalse(is_valid_pan('ABCDE12345'))
        self.assertFalse(is_valid_pan('1BCDE1234F'))

    def test_non_ascii_digits_rejected(self):
        self.assertFalse(is_valid_pan('ABCDE١٢٣٤F'))

    def test_empty_string(self):
        self.assertFalse(is_valid_pan(''))


class FullNameValidatorTests(SimpleTestCase):

    def test_two_long_words(self):
        self.assertTrue(is_valid_full_name('John Smith'))

    def test_three_words(self):
        self.assertTrue(is_valid_full_name('Rahul Kumar Sharma'))

    def test_short_words_rejected(self):
        self.assertFalse(is_valid_full_name('Jo Ann'))

    def test_one_short_word_rejected(self):
        self.assertFalse(is_valid_full_name('Rahul Rao'))

    def test_single_word_rejected(self):
        self.assertFalse(is_valid_full_name('Rahul'))

    def test_extra_whitespace_allowed(self):
        self.assertTrue(is_valid_full_name('  John    Smith  '))

    def test_digits_rejected(self):
        self.assertFalse(is_valid_full_name('John Smith2'))

    def test_punctuation_rejected(self):
        self.assertFalse(is_valid_full_name("John O'Neil"))

    def test_whitespace_only(self):
        self.assertFalse(is_valid_full_name('   '))

    def test_empty_string(self):
        self.assertFalse(is_valid_full_name(''))


class AmountValidatorTests(SimpleTestCase):

    def test_nine_digits(self):
        self.assertTrue(is_valid_amount('123456789'))

    def test_ten_digits_rejected(self):
        self.assertFalse(is_valid_amount('1234567890'))

    def test_letters_rejected(self):
        self.assertFalse(is_valid_amount('12a'))

    def test_sign_rejected(self):
        self.assertFalse(is_valid_amount('-100'))
        self.assertFalse(is_valid_amount('+100'))

    def test_decimal_rejected(self):
        self.assertFalse(is_valid_amount('100.50'))

    def test_empty_string(self):
        self.assertFalse(is_valid_amount(''))

    def test_single_digit(self):
        self.assertTrue(is_valid_amount('0'))
