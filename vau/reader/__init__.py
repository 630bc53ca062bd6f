from vau.reader.parser import lex, TokenStream, parse_all, parse_to_expression
