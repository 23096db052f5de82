import pytest

from glcubes.shaderprogram import Shader, ShaderError, read_shader_sources

VERTEX = "#version 330 core\nlayout (location = 0) in vec3 aPos;\nvoid main() { gl_Position = vec4(aPos, 1.0); }\n"
FRAGMENT = "#version 330 core\nout vec4 FragColor;\nvoid main() { FragColor = vec4(1.0); }\n"


@pytest.fixture
def shader_files(tmp_path):
    vertex = tmp_path / "default.vert"
    fragment = tmp_path / "default.frag"
    vertex.write_text(VERTEX, encoding="utf-8")
    fragment.write_text(FRAGMENT, encoding="utf-8")
    return vertex, fragment


def test_read_sources_round_trip(shader_files):
    vertex, fragment = shader_files
    assert read_shader_sources(vertex, fragment) == (VERTEX, FRAGMENT)


def test_missing_vertex_file(tmp_path, shader_files):
    _, fragment = shader_files
    with pytest.raises(ShaderError, match="Error reading vertex shader file"):
        read_shader_sources(tmp_path / "missing.vert", fragment)


def test_missing_fragment_file(tmp_path, shader_files):
    vertex, _ = shader_files
    with pytest.raises(ShaderError, match="Error reading fragment shader file"):
        read_shader_sources(vertex, tmp_path / "missing.frag")


def test_from_files_reports_missing_sources(tmp_path):
    with pytest.raises(ShaderError, match="vertex"):
        Shader.from_files(tmp_path / "a.vert", tmp_path / "a.frag")


def test_uniform_name_with_nul_is_rejected():
    with pytest.raises(ValueError, match="NUL"):
        Shader(1).uniform_location("mo\0del")


def test_set_float_rejects_nul_name():
    with pytest.raises(ValueError, match="NUL"):
        Shader(1).set_float("a\0b", 1.0)


def test_set_int_rejects_nul_name():
    with pytest.raises(ValueError, match="NUL"):
        Shader(1).set_int("texture\x001", 0)


def test_set_mat4_needs_sixteen_values():
    with pytest.raises(ValueError, match="16 values"):
        Shader(1).set_mat4("projection", [1.0, 0.0, 0.0, 1.0])


def test_set_mat4_checks_name_after_values():
    with pytest.raises(ValueError, match="NUL"):
        Shader(1).set_mat4("pro\0jection", [0.0] * 16)