import os
from dictionary import DictionaryIndex
from solver import load_dictionary, read_numbers, encode_numbers
from translator import translate_numbers, format_solution

TESTS_DIR = os.path.join(os.path.dirname(__file__), 'tests')

def load_expected(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read().splitlines()

def test_sample_matches_expected_output(
    words_path=os.path.join(TESTS_DIR, 'words.txt'),
    numbers_path=os.path.join(TESTS_DIR, 'numbers.txt'),
    expected_path=os.path.join(TESTS_DIR, 'expected_output.txt'),
):
    import io
    index = DictionaryIndex.build(load_dictionary(words_path))
    out = io.StringIO()
    total_numbers, total_solutions = encode_numbers(read_numbers(numbers_path), index, out=out)
    expected = load_expected(expected_path)
    assert out.getvalue().splitlines() == expected, f"Output differs from {expected_path}:\n{out.getvalue()}"
    assert total_numbers == 8
    assert total_solutions == len(expected)

def test_records_match_printed_output(
    words_path=os.path.join(TESTS_DIR, 'words.txt'),
    numbers_path=os.path.join(TESTS_DIR, 'numbers.txt'),
    expected_path=os.path.join(TESTS_DIR, 'expected_output.txt'),
):
    index = DictionaryIndex.build(load_dictionary(words_path))
    lines = [format_solution(num, segs) for num, segs in translate_numbers(read_numbers(numbers_path), index)]
    assert lines == load_expected(expected_path)
