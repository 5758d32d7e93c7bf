from qshell.client.segmenter import InputBuffer, extract_statement, find_terminator


def extract_all(text):
    buffer = InputBuffer(text)
    statements = []
    while True:
        statement = extract_statement(buffer)
        if statement is None:
            break
        statements.append(statement)
    return statements, buffer.text


def test_single_statement():
    buffer = InputBuffer('SELECT * FROM t;\n')
    assert extract_statement(buffer) == 'SELECT * FROM t;'
    assert buffer.text == ''
    assert extract_statement(buffer) is None


def test_no_terminator():
    buffer = InputBuffer('SELECT * FROM t\n')
    assert extract_statement(buffer) is None
    assert buffer.text == 'SELECT * FROM t\n'


def test_empty_and_blank_buffer():
    buffer = InputBuffer()
    assert extract_statement(buffer) is None
    assert buffer.text == ''

    buffer = InputBuffer('  \n\t ')
    assert extract_statement(buffer) is None
    assert buffer.text == '  \n\t '


def test_terminator_in_single_quotes():
    buffer = InputBuffer("INSERT INTO t VALUES ('a;b');\n")
    assert extract_statement(buffer) == "INSERT INTO t VALUES ('a;b');"
    assert buffer.text == ''


def test_terminator_in_double_quotes():
    statements, rest = extract_all('SELECT "x;y" FROM t; SELECT 1;')
    assert statements == ['SELECT "x;y" FROM t;', 'SELECT 1;']
    assert rest == ''


def test_mixed_quote_kinds():
    statements, rest = extract_all('"it\'s a test";\n')
    assert statements == ['"it\'s a test";']
    assert rest == ''

    statements, rest = extract_all("'say \"hi;\"';\n")
    assert statements == ["'say \"hi;\"';"]


def test_unterminated_quote():
    buffer = InputBuffer("SELECT 'abc;\n")
    assert extract_statement(buffer) is None
    assert buffer.text == "SELECT 'abc;\n"


def test_quote_spanning_lines():
    buffer = InputBuffer()
    buffer.append("SELECT 'abc\n")
    assert extract_statement(buffer) is None
    buffer.append("def';\n")
    assert extract_statement(buffer) == "SELECT 'abc\ndef';"
    assert buffer.text == ''


def test_multiple_statements_strip_whitespace():
    statements, rest = extract_all('A;  B;\n\tC;\n')
    assert statements == ['A;', 'B;', 'C;']
    assert rest == ''


def test_trailing_partial_statement_is_kept():
    statements, rest = extract_all('A; B; SELECT\n')
    assert statements == ['A;', 'B;']
    assert rest == 'SELECT\n'


def test_leading_whitespace_kept_on_first_statement():
    buffer = InputBuffer('   A;')
    assert extract_statement(buffer) == '   A;'


def test_doubled_quotes_toggle_twice():
    # no escape handling, '' closes and reopens the literal
    statements, rest = extract_all("SELECT 'it''s;';\n")
    assert statements == ["SELECT 'it''s;';"]

    # a lone apostrophe keeps everything after it quoted
    statements, rest = extract_all("SELECT * FROM t WHERE n = 'O'Brien'; x;\n")
    assert statements == []
    assert rest == "SELECT * FROM t WHERE n = 'O'Brien'; x;\n"


def test_find_terminator():
    assert find_terminator('') == -1
    assert find_terminator(';') == 0
    assert find_terminator("';';") == 3
    assert find_terminator('"\'";') == 3
    assert find_terminator('abc') == -1
