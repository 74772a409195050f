"""Character, memory, string, transformation, output and linked-list helpers."""