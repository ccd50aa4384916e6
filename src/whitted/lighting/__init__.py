from whitted.lighting.light import Light, PointLight, AreaLight

__all__ = ["Light", "PointLight", "AreaLight"]
