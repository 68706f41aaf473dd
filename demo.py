from pprint import pprint

from pineapple import Parser
from tests.test_util import open_file

# Load a program string
program = open_file("data/valid/hello.pineapple")

program = """
$greeting = "Hello, world!"
$empty = ""
print($greeting)
print( $empty )
"""

# Parse the program into an AST
parser = Parser()
tree = parser.parse(program)

# Print out the tree
print("=" * 25)
print("Tree:")
print("=" * 25)
pprint(tree)

# Print out the tree as a formatted program
print("=" * 25)
print("Program:")
print("=" * 25)
print(tree)
