"""Character, conversion, memory, string, output, line-reading and linked-list helpers."""