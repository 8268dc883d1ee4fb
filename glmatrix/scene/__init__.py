from .camera import Camera
