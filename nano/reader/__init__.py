from nano.reader.parser import lex, parse, Token, TokenStream
