import numpy as np

from tetrasphere.geometry.vector import component_product4


class Light:
    def __init__(self, position=(2.0, 2.0, 2.0, 1.0), ambient=(0.2, 0.2, 0.2, 1.0),
                 diffuse=(1.0, 1.0, 1.0, 1.0), specular=(1.0, 1.0, 1.0, 1.0)):
        """
        position : vec4, eye space
        ambient  : vec4 colour
        diffuse  : vec4 colour
        specular : vec4 colour
        """
        self.position = np.array(position, dtype=np.float32)
        self.ambient = np.array(ambient, dtype=np.float32)
        self.diffuse = np.array(diffuse, dtype=np.float32)
        self.specular = np.array(specular, dtype=np.float32)


class Material:
    def __init__(self, ambient=(0.2, 0.3, 0.8, 1.0), diffuse=(0.2, 0.3, 0.8, 1.0),
                 specular=(1.0, 1.0, 1.0, 1.0), shininess=64.0):
        """
        ambient   : vec4 reflectance
        diffuse   : vec4 reflectance
        specular  : vec4 reflectance
        shininess : specular exponent
        """
        self.ambient = np.array(ambient, dtype=np.float32)
        self.diffuse = np.array(diffuse, dtype=np.float32)
        self.specular = np.array(specular, dtype=np.float32)
        self.shininess = float(shininess)


class LightingProducts:
    def __init__(self, light_position, ambient_product, diffuse_product, specular_product, shininess):
        self.light_position = light_position
        self.ambient_product = ambient_product
        self.diffuse_product = diffuse_product
        self.specular_product = specular_product
        self.shininess = shininess


def lighting_products(light: Light, material: Material) -> LightingProducts:
    """
    Combine light and material colours into the shader constants.

    :param light: The scene light
    :param material: The sphere material
    :return: Products ready for upload
    :rtype: LightingProducts
    """
    return LightingProducts(
        light_position=light.position.copy(),
        ambient_product=component_product4(light.ambient, material.ambient),
        diffuse_product=component_product4(light.diffuse, material.diffuse),
        specular_product=component_product4(light.specular, material.specular),
        shininess=material.shininess,
    )


MATERIAL_TABLE = {
    "default": lambda: Material(),
    "gold": lambda: Material(
        ambient=(0.25, 0.2, 0.07, 1.0),
        diffuse=(0.75, 0.61, 0.23, 1.0),
        specular=(0.63, 0.56, 0.37, 1.0),
        shininess=51.2,
    ),
}


class MaterialRegistry:
    _materials: dict[str, Material] = {}

    @classmethod
    def get(cls, name: str) -> Material:
        if name not in cls._materials:
            cls._materials[name] = cls._load(name)
        return cls._materials[name]

    @classmethod
    def create(cls, name: str) -> Material:
        # fresh instance, not shared with get()
        return cls._load(name)

    @staticmethod
    def _load(name: str) -> Material:
        if isinstance(name, str) and name in MATERIAL_TABLE:
            return MATERIAL_TABLE[name]()
        else:
            raise ValueError(f"Unknown material: {name}")
