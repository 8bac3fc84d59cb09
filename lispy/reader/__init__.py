from lispy.reader.parser import AstNode, TokenStream, lex, parse
from lispy.reader.reader import read, read_number
