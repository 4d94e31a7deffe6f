"""Small self-contained examples: basic values, functions, generics, pets and error handling."""