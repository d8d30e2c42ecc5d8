import pytest

from tetrasphere.rendering import renderer


class FakeGL:
    """Just enough of OpenGL.GL for build_program, with switchable failures."""

    GL_VERTEX_SHADER = 1
    GL_FRAGMENT_SHADER = 2
    GL_COMPILE_STATUS = 10
    GL_LINK_STATUS = 11

    def __init__(self, compile_ok=True, link_ok=True):
        self.compile_ok = compile_ok
        self.link_ok = link_ok
        self.next_id = 100
        self.sources = {}
        self.attached = []
        self.deleted_shaders = []
        self.deleted_programs = []

    def glCreateShader(self, shader_type):
        self.next_id += 1
        return self.next_id

    def glShaderSource(self, shader, source):
        self.sources[shader] = source

    def glCompileShader(self, shader):
        pass

    def glGetShaderiv(self, shader, pname):
        return self.compile_ok

    def glGetShaderInfoLog(self, shader):
        return b"0:1: syntax error\n"

    def glDeleteShader(self, shader):
        self.deleted_shaders.append(shader)

    def glCreateProgram(self):
        return 7

    def glAttachShader(self, program, shader):
        self.attached.append(shader)

    def glLinkProgram(self, program):
        pass

    def glGetProgramiv(self, program, pname):
        return self.link_ok

    def glGetProgramInfoLog(self, program):
        return b"unresolved varying\n"

    def glDeleteProgram(self, program):
        self.deleted_programs.append(program)


STAGES = ((FakeGL.GL_VERTEX_SHADER, "sphere.vert"), (FakeGL.GL_FRAGMENT_SHADER, "sphere.frag"))


def test_packaged_shaders_are_readable():
    assert "u_model_view" in renderer.load_shader("sphere.vert")
    assert "u_shininess" in renderer.load_shader("sphere.frag")


def test_missing_shader_file_raises():
    with pytest.raises(RuntimeError, match="not found"):
        renderer.load_shader("nope.frag")


def test_build_program_compiles_links_and_frees_stages(monkeypatch):
    gl = FakeGL()
    monkeypatch.setattr(renderer, "GL", gl)

    assert renderer.build_program(STAGES) == 7
    assert len(gl.attached) == 2
    assert sorted(gl.deleted_shaders) == sorted(gl.attached)
    assert any("u_model_view" in src for src in gl.sources.values())


def test_compile_error_names_the_file(monkeypatch):
    monkeypatch.setattr(renderer, "GL", FakeGL(compile_ok=False))
    with pytest.raises(RuntimeError, match="sphere.vert did not compile: 0:1: syntax error"):
        renderer.build_program(STAGES)


def test_link_error_frees_program_and_stages(monkeypatch):
    gl = FakeGL(link_ok=False)
    monkeypatch.setattr(renderer, "GL", gl)

    with pytest.raises(RuntimeError, match="did not link: unresolved varying"):
        renderer.build_program(STAGES)
    assert gl.deleted_programs == [7]
    assert len(gl.deleted_shaders) == 2
