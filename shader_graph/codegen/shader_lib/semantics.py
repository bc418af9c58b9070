# MME semantic variables, fixed textures and the vertex output struct

SEMANTICS_HLSL = r"""
float4x4 worldMatrix : WORLD;
float4x4 worldViewMatrix : WORLDVIEW;
float4x4 worldViewProjMatrix : WORLDVIEWPROJECTION;
float4x4 lightViewMatrix : VIEW < string Object = "Light"; >;
float4x4 worldInvMatrix : WORLDINVERSE;
float4x4 worldViewProjTransMatrix : WORLDVIEWPROJECTIONTRANSPOSE;
float4 materialDiffuse  : DIFFUSE  < string Object = "Geometry"; >;
float3 materialAmbient  : AMBIENT  < string Object = "Geometry"; >;
float3 materialEmmisive : EMISSIVE < string Object = "Geometry"; >;
float3 materialSpecular : SPECULAR < string Object = "Geometry"; >;
float  specularPower    : SPECULARPOWER < string Object = "Geometry"; >;
float3 materialToon     : TOONCOLOR;
float3 edgeColor        : EDGECOLOR;
float3 lightDiffuse     : DIFFUSE   < string Object = "Light"; >;
float3 lightAmbient     : AMBIENT   < string Object = "Light"; >;
float3 lightSpecular    : SPECULAR  < string Object = "Light"; >;
float4 groundShadowColor : GROUNDSHADOWCOLOR;

float3 light_dir : DIRECTION < string Object = "Light"; >;
float3 cam_pos : POSITION < string Object = "Camera"; >;

float2 screenSize : VIEWPORTPIXELSIZE;

float ftime : TIME < bool SyncInEditMode = true; >;
float elapsed_time : ELAPSEDTIME;

texture mat_tex : MATERIALTEXTURE;
sampler mat_tex_sampler = sampler_state {
    texture = <mat_tex>;
    MINFILTER = LINEAR;
    MAGFILTER = LINEAR;
};

texture sph_tex : MATERIALSPHEREMAP;
sampler sph_tex_sampler = sampler_state {
    texture = <sph_tex>;
    MINFILTER = LINEAR;
    MAGFILTER = LINEAR;
};

texture toon_tex : MATERIALTOONTEXTURE;
sampler toon_tex_sampler = sampler_state {
    texture = <toon_tex>;
    MINFILTER = LINEAR;
    MAGFILTER = LINEAR;
    ADDRESSU = CLAMP;
    ADDRESSV = CLAMP;
};
"""

STRUCTS_HLSL = r"""
struct VS_OUTPUT {
    float4 pos : POSITION;
    float3 uv : TEXCOORD1;
    float3 nrm : TEXCOORD2;
    float3 wpos : TEXCOORD3;
    float4 spos : TEXCOORD4;
};
"""
