# Technique block closing every effect file.
# Without ENABLE_DRAW_EDGE_PASS an empty edge technique suppresses MMD's
# default outline.

TECHNIQUES_HLSL = r"""
technique MainTec < string MMDPass = "object"; > {
    pass DrawObject {
        VertexShader = compile vs_3_0 Basic_VS();
        PixelShader = compile ps_3_0 Basic_PS();
    }
}

technique MainTec_ss < string MMDPass = "object_ss"; > {
    pass DrawObject {
        VertexShader = compile vs_3_0 Basic_VS();
        PixelShader = compile ps_3_0 Basic_PS();
    }
}

#ifndef ENABLE_DRAW_EDGE_PASS
technique EdgeTec < string MMDPass = "edge"; > { }
#endif
"""
