# HLSL code generation: generator, emitters, boilerplate library, assembler
